"""Reusable dashboard UI widgets."""
from datetime import datetime, timezone

from utils.formatters import time_ago
from dashboard.theme import BTC_ORANGE, TARGET_GREEN

SPARK_CHARS = "▁▂▃▄▅▆▇█"
EMPTY_CHAR = "·"


def sparkline(values, width=20, lo=None, hi=None):
    """Generate Unicode sparkline from a list of values.

    None entries render as a gap. `lo`/`hi` pin the scale so several series
    can share one axis.
    """
    if not values:
        return ""
    vals = [v for v in values if v is not None]
    if not vals:
        return EMPTY_CHAR * min(len(values), width)
    if len(values) > width:
        step = len(values) / width
        values = [values[int(i * step)] for i in range(width)]
    mn = min(vals) if lo is None else lo
    mx = max(vals) if hi is None else hi
    rng = mx - mn if mx != mn else 1
    chars = []
    for v in values:
        if v is None:
            chars.append(EMPTY_CHAR)
        else:
            chars.append(SPARK_CHARS[max(0, min(7, int((v - mn) / rng * 7)))])
    return "".join(chars)


def target_progress_bar(pct, width=30):
    """Progress bar toward the target; fill stops at 100%."""
    filled = int(min(max(pct, 0), 100) / 100 * width)
    empty = width - filled
    color = TARGET_GREEN if pct >= 100 else BTC_ORANGE
    return f"[{color}]{'█' * filled}[/{color}][dim]{'░' * empty}[/dim]"


def data_age_indicator(timestamp):
    """Show data freshness with color coding."""
    if timestamp is None:
        return "[red]No data[/red]"
    age_str = time_ago(timestamp)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - timestamp).total_seconds()
    if age_seconds < 120:
        return f"[green]Updated {age_str}[/green]"
    elif age_seconds < 600:
        return f"[yellow]Updated {age_str}[/yellow]"
    else:
        return f"[red]Stale: {age_str}[/red]"
