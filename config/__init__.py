"""Configuration management.

Only ambient settings live here (API endpoint, storage, logging, web server).
The price target and its dates are fixed in utils.constants.
"""
import os
import yaml
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "default_config.yaml"

REQUIRED_SECTIONS = ["api", "database", "logging", "web"]


def load_config(path=None):
    """Load config from YAML, merging defaults with optional overrides."""
    with open(_DEFAULT_CONFIG) as f:
        config = yaml.safe_load(f)

    if path and Path(path).exists():
        with open(path) as f:
            overrides = yaml.safe_load(f) or {}
        config = _deep_merge(config, overrides)

    # Environment variable overrides
    env_map = {
        "BTC_TARGET_DB_PATH": ("database", "path"),
        "BTC_TARGET_LOG_LEVEL": ("logging", "level"),
    }
    for env_key, config_path in env_map.items():
        val = os.environ.get(env_key)
        if val:
            d = config
            for k in config_path[:-1]:
                d = d.setdefault(k, {})
            d[config_path[-1]] = val

    _validate_config(config)
    return config


def _deep_merge(base, override):
    """Recursively merge override into base dict."""
    result = base.copy()
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _validate_config(config):
    """Basic config validation."""
    for section in REQUIRED_SECTIONS:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    if config["api"].get("timeout", 0) <= 0:
        raise ValueError("api.timeout must be > 0 seconds")
