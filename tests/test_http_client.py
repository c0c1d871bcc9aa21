"""Tests for the HTTP client error mapping."""
import pytest
import requests
from unittest.mock import MagicMock

from utils.http_client import HTTPClient, APIError


def _response(status=200, json_data=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status
    resp.text = "body"
    if json_error:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def http():
    c = HTTPClient("https://example.test/api/")
    c.session = MagicMock()
    return c


def test_get_json(http):
    http.session.get.return_value = _response(json_data={"ok": True})
    assert http.get("/ping", params={"a": 1}) == {"ok": True}
    url = http.session.get.call_args[0][0]
    assert url == "https://example.test/api/ping"


def test_non_200(http):
    http.session.get.return_value = _response(status=503)
    with pytest.raises(APIError) as exc:
        http.get("/ping")
    assert exc.value.status_code == 503


def test_network_error(http):
    http.session.get.side_effect = requests.exceptions.ConnectionError("refused")
    with pytest.raises(APIError):
        http.get("/ping")


def test_bad_json(http):
    http.session.get.return_value = _response(json_error=ValueError("no json"))
    with pytest.raises(APIError):
        http.get("/ping")
