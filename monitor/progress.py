"""Progress toward the target: days left, completion, required growth."""
import math

from models.tracker import ProgressStats
from monitor.axis import month_index
from monitor.projection import required_growth_pct
from utils.constants import DEFAULT_TARGET, LAST_SLOT, ONE_DAY_SECONDS


def days_remaining(now, target_date):
    """Whole days until the target date, rounded up, never negative."""
    seconds = (target_date - now).total_seconds()
    return max(0, math.ceil(seconds / ONE_DAY_SECONDS))


def completion_pct(current_price, target_price):
    """Percent of the target reached. Not capped at 100."""
    return current_price / target_price * 100


def compute_progress(current_price, now, target=DEFAULT_TARGET):
    days = days_remaining(now, target.date)
    pct = completion_pct(current_price, target.price)
    months_left = LAST_SLOT - month_index(now, target.start)

    return ProgressStats(
        days_remaining=days,
        completion_pct=pct,
        bar_width_pct=min(pct, 100.0),
        daily_growth_pct=required_growth_pct(current_price, target.price, days),
        monthly_growth_pct=required_growth_pct(current_price, target.price, months_left),
        price_gap=target.price - current_price,
    )
