"""
Chart data preparation — shared by the Plotly web chart (web/charts.py), the
matplotlib export (web/export.py) and the terminal chart panel.

Builds an immutable snapshot of the 13 axis labels and the three series.
No rendering framework dependency.
"""
import logging
from dataclasses import dataclass, asdict

from monitor.axis import axis_labels, month_index
from monitor.projection import project_path
from utils.constants import DEFAULT_TARGET, AXIS_SLOTS, LAST_SLOT

logger = logging.getLogger("btctarget.web.chart_data")

# Shared color definitions
COLORS = {
    "historical": "#667EEA",
    "historical_fill": "rgba(102, 126, 234, 0.1)",
    "projected": "#E74C3C",
    "target": "#27AE60",
    "orange": "#F7931A",
}

SERIES_LABELS = {
    "historical": "Historical Price",
    "projected": "Projected Path",
    "target": "Target Price",
}


@dataclass(frozen=True)
class ChartSnapshot:
    labels: tuple
    historical: tuple
    projected: tuple
    target: tuple
    current_slot: int

    def to_dict(self):
        d = asdict(self)
        return {k: list(v) if isinstance(v, tuple) else v for k, v in d.items()}


def build_chart_snapshot(buckets, current_price, now, target=DEFAULT_TARGET):
    """
    Assemble the three chart series for one update cycle.

    Args:
        buckets: dict slot → monthly max price (from monitor.axis.monthly_max)
        current_price: latest quote
        now: observation time, decides the current slot
        target: TrackerTarget

    Returns:
        ChartSnapshot. Slots with no data hold None.
    """
    slot = month_index(now, target.start)

    historical = [None] * AXIS_SLOTS
    for s, price in buckets.items():
        historical[s] = price
    historical[slot] = current_price

    projected = [None] * AXIS_SLOTS
    months_remaining = LAST_SLOT - slot
    if months_remaining > 0:
        projected[slot] = current_price
        for i, price in enumerate(project_path(current_price, target.price, months_remaining), start=1):
            projected[slot + i] = price
    else:
        projected[LAST_SLOT] = float(target.price)

    target_line = [None] * AXIS_SLOTS
    target_line[LAST_SLOT] = float(target.price)

    return ChartSnapshot(
        labels=tuple(axis_labels(target.start)),
        historical=tuple(historical),
        projected=tuple(projected),
        target=tuple(target_line),
        current_slot=slot,
    )


def empty_snapshot(target=DEFAULT_TARGET):
    """Snapshot shown before the first successful cycle: only the target point."""
    target_line = [None] * AXIS_SLOTS
    target_line[LAST_SLOT] = float(target.price)
    return ChartSnapshot(
        labels=tuple(axis_labels(target.start)),
        historical=(None,) * AXIS_SLOTS,
        projected=(None,) * AXIS_SLOTS,
        target=tuple(target_line),
        current_slot=0,
    )
