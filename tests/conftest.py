"""Shared test fixtures."""
import os
import sys
import pytest
import tempfile

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timezone
from models.database import Database
from models.tracker import PriceQuote, HistoricalSample
from monitor.highs import HighsLedger
from utils.errors import DataUnavailable


class FakePriceAPI:
    """Stand-in for CoinGeckoClient with scripted quotes."""

    def __init__(self, quotes=None, history=None, history_error=None):
        self.quotes = list(quotes or [])
        self.history = history or []
        self.history_error = history_error
        self.quote_calls = 0
        self.range_calls = []

    def get_current_price(self):
        self.quote_calls += 1
        if not self.quotes:
            raise DataUnavailable("no scripted quote")
        item = self.quotes.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def get_price_range(self, start, end):
        self.range_calls.append((start, end))
        if self.history_error:
            raise self.history_error
        return list(self.history)


def quote(price, change=1.5):
    return PriceQuote(price=price, change_24h=change)


def sample(year, month, day, price):
    ts = datetime(year, month, day, 12, tzinfo=timezone.utc)
    return HistoricalSample(timestamp=int(ts.timestamp() * 1000), price=price)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    db = Database(db_path)
    db.connect()
    yield db
    db.close()
    os.unlink(db_path)


@pytest.fixture
def ledger(temp_db):
    led = HighsLedger(temp_db)
    led.load()
    return led


@pytest.fixture
def mid_2025():
    """An observation time inside the target year, slot 6."""
    return datetime(2025, 6, 15, 12, tzinfo=timezone.utc)


@pytest.fixture
def sample_history():
    """A few samples per month from Dec 2024 to May 2025."""
    return [
        sample(2024, 12, 31, 93_000),
        sample(2025, 1, 5, 98_000),
        sample(2025, 1, 20, 105_000),
        sample(2025, 2, 10, 97_000),
        sample(2025, 3, 3, 92_000),
        sample(2025, 3, 28, 87_000),
        sample(2025, 4, 15, 84_000),
        sample(2025, 5, 22, 111_000),
    ]
