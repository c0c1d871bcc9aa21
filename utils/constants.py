"""Fixed tracker targets and dashboard constants."""
from dataclasses import dataclass
from datetime import datetime, timezone

TARGET_PRICE = 180_000
TARGET_DATE = datetime(2025, 12, 31, tzinfo=timezone.utc)
START_DATE = datetime(2024, 12, 31, tzinfo=timezone.utc)
UPDATE_INTERVAL = 30  # seconds

# Chart axis: start month through target month inclusive
AXIS_SLOTS = 13
LAST_SLOT = AXIS_SLOTS - 1

MAX_HIGH_RECORDS = 10
LEDGER_KEY = "bitcoinAnnualHighs2025"

ONE_DAY_SECONDS = 24 * 60 * 60

ERROR_MESSAGE = "Failed to load data"
NO_HIGHS_MESSAGE = "No highs recorded yet"


@dataclass(frozen=True)
class TrackerTarget:
    """The price goal and the window it is tracked over."""
    price: float = TARGET_PRICE
    date: datetime = TARGET_DATE
    start: datetime = START_DATE
    interval_seconds: int = UPDATE_INTERVAL

    @property
    def year(self):
        """Observation year for the highs ledger."""
        return self.date.year


DEFAULT_TARGET = TrackerTarget()
