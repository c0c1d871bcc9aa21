"""TargetTracker - the fetch-and-update cycle behind every display surface."""
import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from models.tracker import DisplayState, PriceQuote
from monitor.axis import monthly_max
from monitor.progress import compute_progress
from utils.constants import DEFAULT_TARGET, ERROR_MESSAGE
from utils.errors import DataUnavailable
from utils.formatters import format_usd, format_pct, format_timestamp, format_high_date
from utils.http_client import APIError
from web.chart_data import build_chart_snapshot, empty_snapshot

logger = logging.getLogger("btctarget.tracker")


def _utcnow():
    return datetime.now(timezone.utc)


class DisplaySink:
    """Receiver for tracker output. Every hook is optional."""

    def show(self, display):
        pass

    def render_chart(self, snapshot):
        pass

    def celebrate(self, achieved_at, price):
        pass

    def notify_new_high(self, record):
        pass


@dataclass
class TrackerState:
    quote: Optional[PriceQuote] = None
    history: list = field(default_factory=list)
    buckets: dict = field(default_factory=dict)
    celebrated: bool = False
    achieved_at: Optional[datetime] = None
    in_flight: bool = False
    chart: object = None
    display: DisplayState = field(default_factory=DisplayState)
    last_update: Optional[datetime] = None


class TargetTracker:
    def __init__(self, api, ledger, target=DEFAULT_TARGET, sinks=None, clock=None):
        self.api = api
        self.ledger = ledger
        self.target = target
        self.sinks = list(sinks or [])
        self.clock = clock or _utcnow
        self.state = TrackerState(chart=empty_snapshot(target))
        self._cycle_lock = threading.Lock()

    def add_sink(self, sink):
        self.sinks.append(sink)

    # ─── Startup ──────────────────────────────────────────

    def start(self):
        """Load the persisted ledger and the historical series once."""
        self.ledger.load()
        self.state.display = replace(self.state.display, highs=self._highs_view())
        self.load_history()
        self._push("show", self.state.display)
        self._push("render_chart", self.state.chart)

    def load_history(self):
        """Fetch samples from the start date to now. Failure leaves an empty series."""
        try:
            samples = self.api.get_price_range(self.target.start, self.clock())
        except (DataUnavailable, APIError) as e:
            logger.warning(f"Historical data unavailable, chart degraded: {e}")
            samples = []
        self.state.history = samples
        self.state.buckets = monthly_max(samples, self.target.start)
        return samples

    # ─── Update cycle ─────────────────────────────────────

    def run_cycle(self, now=None):
        """One fetch-and-update pass. Returns True when the displays were refreshed."""
        if not self._cycle_lock.acquire(blocking=False):
            logger.debug("Update cycle already in flight, skipping")
            return False
        self.state.in_flight = True
        try:
            return self._cycle(now)
        finally:
            self.state.in_flight = False
            self._cycle_lock.release()

    def _cycle(self, now):
        try:
            quote = self.api.get_current_price()
        except (DataUnavailable, APIError) as e:
            logger.error(f"Quote fetch failed: {e}")
            self.state.display = replace(self.state.display, error=ERROR_MESSAGE)
            self._push("show", self.state.display)
            return False

        now = now or self.clock()
        price = quote.price
        self.state.quote = quote
        stats = compute_progress(price, now, self.target)

        display = replace(
            self.state.display,
            error=None,
            price_text=format_usd(price),
            change_text=format_pct(quote.change_24h),
            change_class="positive" if quote.change_24h >= 0 else "negative",
            price_gap_text=format_usd(stats.price_gap),
            completion_text=f"{stats.completion_pct:.1f}% complete",
            completion_rate_text=f"{stats.completion_pct:.1f}%",
            bar_width_pct=stats.bar_width_pct,
            days_remaining=stats.days_remaining,
            daily_growth_text=f"{stats.daily_growth_pct:.2f}%",
            monthly_growth_text=f"{stats.monthly_growth_pct:.2f}%",
        )

        if price >= self.target.price and not self.state.celebrated:
            self.state.celebrated = True
            self.state.achieved_at = now
            display = replace(display, celebrating=True,
                              achieved_at_text=f"Achieved at: {format_timestamp(now)}")
            logger.info(f"Target ${self.target.price:,.0f} reached at ${price:,.2f}")
            self._push("celebrate", now, price)

        record = self.ledger.record_if_high(price, now)
        if record is not None:
            display = replace(display, new_high_text=f"New {self.target.year} high! {format_usd(price)}")
            self._push("notify_new_high", record)
        display = replace(display, highs=self._highs_view())

        self.state.chart = build_chart_snapshot(self.state.buckets, price, now, self.target)
        self._push("render_chart", self.state.chart)

        self.state.last_update = now
        display = replace(display, last_update_text=format_timestamp(now))
        self.state.display = display
        self._push("show", display)

        logger.info(
            f"BTC {format_usd(price)} ({format_pct(quote.change_24h)}) | "
            f"{stats.completion_pct:.1f}% of target | {stats.days_remaining}d left"
        )
        return True

    # ─── Helpers ──────────────────────────────────────────

    def _highs_view(self):
        return [
            {"date": format_high_date(r.date), "price": format_usd(r.price)}
            for r in self.ledger.records
        ]

    def _push(self, hook, *args):
        for sink in self.sinks:
            method = getattr(sink, hook, None)
            if method is None:
                continue
            try:
                method(*args)
            except Exception as e:
                logger.warning(f"Display sink {type(sink).__name__}.{hook} failed: {e}")
