"""Monthly chart axis: maps dates onto the 13 slots from start month to target month."""
from datetime import datetime

from utils.constants import START_DATE, LAST_SLOT, AXIS_SLOTS


def month_index(when, start=START_DATE):
    """Whole-month offset of `when` from the start month, clamped to [0, 12].

    Resolution is monthly: every day of a calendar month maps to the same slot.
    """
    months = (when.year - start.year) * 12 + (when.month - start.month)
    return max(0, min(LAST_SLOT, months))


def axis_month(slot, start=START_DATE):
    """(year, month) of an axis slot."""
    offset = start.month - 1 + slot
    return start.year + offset // 12, offset % 12 + 1


def axis_labels(start=START_DATE):
    """Category labels for the 13 slots, e.g. 'Dec 2024' .. 'Dec 2025'."""
    labels = []
    for slot in range(AXIS_SLOTS):
        year, month = axis_month(slot, start)
        labels.append(datetime(year, month, 1).strftime("%b %Y"))
    return labels


def monthly_max(samples, start=START_DATE):
    """Highest sampled price per axis slot.

    Samples outside the window clamp into the first or last slot, the same way
    month_index does. Slots without samples are absent from the result.
    """
    buckets = {}
    for sample in samples:
        slot = month_index(sample.when, start)
        if slot not in buckets or sample.price > buckets[slot]:
            buckets[slot] = sample.price
    return buckets
