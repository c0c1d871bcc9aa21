"""Formatting utilities for display."""
from datetime import datetime, timezone


def format_usd(value, compact=False):
    """Format USD value with commas and 2 decimals. Compact mode for large numbers."""
    if value is None:
        return "N/A"
    value = float(value)
    if compact:
        return f"${format_compact(value)}"
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_pct(value, decimals=2, with_color=False):
    """Format percentage with sign. Optionally include rich color markup."""
    if value is None:
        return "N/A"
    value = float(value)
    sign = "+" if value >= 0 else ""
    formatted = f"{sign}{value:.{decimals}f}%"
    if with_color:
        color = "green" if value >= 0 else "red"
        return f"[{color}]{formatted}[/{color}]"
    return formatted


def format_compact(n):
    """Format number compactly: 1200000 → '1.2M'."""
    if n is None:
        return "N/A"
    n = float(n)
    if abs(n) >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    elif abs(n) >= 1_000:
        return f"{n / 1_000:.1f}K"
    return f"{n:g}"


def format_timestamp(ts):
    """Format a datetime to the last-update readout."""
    if ts is None:
        return "N/A"
    if isinstance(ts, str):
        return ts
    return ts.strftime("%Y-%m-%d %H:%M:%S")


def format_high_date(ts):
    """Short date + time for a highs ledger entry, e.g. 'Mar 5, 2025 14:02'."""
    if ts is None:
        return "N/A"
    if isinstance(ts, str):
        try:
            ts = datetime.fromisoformat(ts.replace("Z", "+00:00"))
        except ValueError:
            return ts
    return f"{ts.strftime('%b')} {ts.day}, {ts.year} {ts.strftime('%H:%M')}"


def time_ago(dt):
    """Return human-readable time since dt. E.g., '3h ago', '2d ago'."""
    if dt is None:
        return "N/A"
    now = datetime.now(timezone.utc)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = now - dt
    seconds = int(delta.total_seconds())

    if seconds < 60:
        return f"{seconds}s ago"
    elif seconds < 3600:
        return f"{seconds // 60}m ago"
    elif seconds < 86400:
        return f"{seconds // 3600}h ago"
    else:
        return f"{seconds // 86400}d ago"
