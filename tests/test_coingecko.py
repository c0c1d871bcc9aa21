"""Tests for the CoinGecko client, with the HTTP layer mocked out."""
import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from monitor.api.coingecko import CoinGeckoClient
from utils.errors import DataUnavailable
from utils.http_client import APIError


@pytest.fixture
def client():
    c = CoinGeckoClient(base_url="https://example.test/api/v3")
    c.client = MagicMock()
    return c


def test_current_price(client):
    client.client.get.return_value = {"bitcoin": {"usd": 97123.45, "usd_24h_change": -1.25}}
    q = client.get_current_price()
    assert q.price == 97123.45
    assert q.change_24h == -1.25
    path, = client.client.get.call_args[0]
    params = client.client.get.call_args[1]["params"]
    assert path == "/simple/price"
    assert params["include_24hr_change"] == "true"


@pytest.mark.parametrize("payload", [
    {},
    {"bitcoin": {}},
    {"bitcoin": {"usd": 97000}},
    {"bitcoin": {"usd": "n/a", "usd_24h_change": 1.0}},
    {"bitcoin": {"usd": 0, "usd_24h_change": 1.0}},
    [],
])
def test_malformed_quote(client, payload):
    client.client.get.return_value = payload
    with pytest.raises(DataUnavailable):
        client.get_current_price()


def test_quote_http_error(client):
    client.client.get.side_effect = APIError("HTTP 429", status_code=429)
    with pytest.raises(DataUnavailable):
        client.get_current_price()


def test_price_range_sorted(client):
    client.client.get.return_value = {"prices": [
        [1740000000000, 95000.0],
        [1735000000000, 93000.0],
        [1738000000000, None],
    ]}
    start = datetime(2024, 12, 1, tzinfo=timezone.utc)
    end = datetime(2025, 6, 15, tzinfo=timezone.utc)
    samples = client.get_price_range(start, end)

    assert [s.price for s in samples] == [93000.0, 95000.0]
    params = client.client.get.call_args[1]["params"]
    assert params["from"] == str(int(start.timestamp()))
    assert params["to"] == str(int(end.timestamp()))


def test_price_range_malformed(client):
    client.client.get.return_value = {"prices": [[1, 2, 3]]}
    with pytest.raises(DataUnavailable):
        client.get_price_range(datetime.now(timezone.utc), datetime.now(timezone.utc))


def test_price_range_missing(client):
    client.client.get.return_value = {"error": "rate limited"}
    with pytest.raises(DataUnavailable):
        client.get_price_range(datetime.now(timezone.utc), datetime.now(timezone.utc))
