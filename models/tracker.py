"""Dataclasses for quotes, price samples, ledger entries and display state."""
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Optional


@dataclass
class PriceQuote:
    price: float = 0.0
    change_24h: float = 0.0
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class HistoricalSample:
    timestamp: int  # epoch milliseconds
    price: float

    @property
    def when(self):
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)


@dataclass
class HighRecord:
    price: float
    timestamp: int  # epoch milliseconds
    date: str  # ISO-8601

    @classmethod
    def at(cls, price, when):
        """Build a record for a price observed at datetime `when`."""
        return cls(
            price=float(price),
            timestamp=int(when.timestamp() * 1000),
            date=when.isoformat(),
        )

    def to_dict(self):
        return {"price": self.price, "date": self.date, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, d):
        return cls(
            price=float(d["price"]),
            timestamp=int(d["timestamp"]),
            date=str(d["date"]),
        )


@dataclass(frozen=True)
class ProgressStats:
    days_remaining: int
    completion_pct: float
    bar_width_pct: float
    daily_growth_pct: float
    monthly_growth_pct: float
    price_gap: float


@dataclass
class DisplayState:
    """Everything the display surfaces show, as ready-to-render values."""
    price_text: str = "--"
    change_text: str = "--"
    change_class: str = ""
    price_gap_text: str = "--"
    completion_text: str = "--"
    completion_rate_text: str = "--"
    bar_width_pct: float = 0.0
    days_remaining: Optional[int] = None
    daily_growth_text: str = "--"
    monthly_growth_text: str = "--"
    last_update_text: str = "--"
    highs: list = field(default_factory=list)
    error: Optional[str] = None
    celebrating: bool = False
    achieved_at_text: Optional[str] = None
    new_high_text: Optional[str] = None

    def to_dict(self):
        return asdict(self)
