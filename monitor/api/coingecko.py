"""CoinGecko API client for the live quote and the historical price range."""
import logging
from datetime import datetime, timezone

from models.tracker import PriceQuote, HistoricalSample
from utils.errors import DataUnavailable
from utils.http_client import HTTPClient, APIError

logger = logging.getLogger("btctarget.coingecko")

DEFAULT_BASE_URL = "https://api.coingecko.com/api/v3"


class CoinGeckoClient:
    def __init__(self, base_url=DEFAULT_BASE_URL, timeout=15, coin_id="bitcoin"):
        self.coin_id = coin_id
        self.client = HTTPClient(base_url=base_url, timeout=timeout)

    def get_current_price(self):
        """Latest USD price and 24h change. Raises DataUnavailable."""
        try:
            data = self.client.get("/simple/price", params={
                "ids": self.coin_id,
                "vs_currencies": "usd",
                "include_24hr_change": "true",
            })
        except APIError as e:
            raise DataUnavailable(f"Quote request failed: {e}") from e

        coin = data.get(self.coin_id) if isinstance(data, dict) else None
        if not isinstance(coin, dict):
            raise DataUnavailable(f"Quote payload has no '{self.coin_id}' entry")

        price = coin.get("usd")
        change = coin.get("usd_24h_change")
        if price is None or change is None:
            raise DataUnavailable("Quote payload is missing usd or usd_24h_change")

        try:
            quote = PriceQuote(
                price=float(price),
                change_24h=float(change),
                fetched_at=datetime.now(timezone.utc),
            )
        except (TypeError, ValueError) as e:
            raise DataUnavailable(f"Quote payload is not numeric: {e}") from e
        if quote.price <= 0:
            raise DataUnavailable(f"Quote price must be positive, got {quote.price}")
        return quote

    def get_price_range(self, start, end):
        """Price samples between two datetimes, oldest first. Raises DataUnavailable."""
        try:
            data = self.client.get(f"/coins/{self.coin_id}/market_chart/range", params={
                "vs_currency": "usd",
                "from": str(int(start.timestamp())),
                "to": str(int(end.timestamp())),
            })
        except APIError as e:
            raise DataUnavailable(f"Range request failed: {e}") from e

        prices = data.get("prices") if isinstance(data, dict) else None
        if not isinstance(prices, list):
            raise DataUnavailable("Range payload has no 'prices' list")

        samples = []
        try:
            for ts, price in prices:
                if price is None:
                    continue
                samples.append(HistoricalSample(timestamp=int(ts), price=float(price)))
        except (TypeError, ValueError) as e:
            raise DataUnavailable(f"Range payload has malformed samples: {e}") from e

        samples.sort(key=lambda s: s.timestamp)
        logger.info(f"Loaded {len(samples)} historical samples")
        return samples

    def close(self):
        self.client.close()
