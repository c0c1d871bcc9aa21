"""Tests for config loading."""
import pytest
import yaml

from config import load_config, _deep_merge


def test_defaults():
    config = load_config()
    assert config["api"]["timeout"] == 15
    assert config["database"]["path"] == "data/tracker.db"
    assert config["web"]["port"] == 5000


def test_yaml_override(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text(yaml.safe_dump({"web": {"port": 8080}}))
    config = load_config(str(path))
    assert config["web"]["port"] == 8080
    assert config["web"]["host"] == "127.0.0.1"


def test_missing_override_file_uses_defaults(tmp_path):
    config = load_config(str(tmp_path / "missing.yaml"))
    assert config["web"]["port"] == 5000


def test_env_override(monkeypatch):
    monkeypatch.setenv("BTC_TARGET_DB_PATH", "/tmp/other.db")
    monkeypatch.setenv("BTC_TARGET_LOG_LEVEL", "DEBUG")
    config = load_config()
    assert config["database"]["path"] == "/tmp/other.db"
    assert config["logging"]["level"] == "DEBUG"


def test_invalid_timeout(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text(yaml.safe_dump({"api": {"timeout": 0}}))
    with pytest.raises(ValueError):
        load_config(str(path))


def test_deep_merge():
    merged = _deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}, "d": 4})
    assert merged == {"a": {"b": 1, "c": 3}, "d": 4}
