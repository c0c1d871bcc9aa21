"""Tests for the monthly chart axis."""
from datetime import datetime, timedelta, timezone

from monitor.axis import month_index, axis_labels, axis_month, monthly_max
from utils.constants import START_DATE, TARGET_DATE
from conftest import sample


def _utc(y, m, d):
    return datetime(y, m, d, tzinfo=timezone.utc)


def test_scenario_mid_june():
    assert month_index(_utc(2025, 6, 15)) == 6


def test_start_month_is_slot_zero():
    assert month_index(START_DATE) == 0
    assert month_index(_utc(2024, 12, 1)) == 0


def test_before_start_clamps_to_zero():
    for when in [_utc(2024, 11, 30), _utc(2024, 1, 1), _utc(2019, 7, 4)]:
        assert month_index(when) == 0


def test_target_month_and_later_clamp_to_twelve():
    assert month_index(TARGET_DATE) == 12
    assert month_index(_utc(2025, 12, 1)) == 12
    assert month_index(_utc(2026, 10, 19)) == 12
    assert month_index(_utc(2030, 1, 1)) == 12


def test_resolution_is_monthly():
    assert month_index(_utc(2025, 3, 1)) == month_index(_utc(2025, 3, 31)) == 3


def test_monotonic_over_weekly_steps():
    when = _utc(2024, 6, 1)
    last = month_index(when)
    while when < _utc(2026, 6, 1):
        when += timedelta(days=7)
        idx = month_index(when)
        assert 0 <= idx <= 12
        assert idx >= last
        last = idx


def test_custom_start():
    start = _utc(2025, 3, 10)
    assert month_index(_utc(2025, 3, 1), start) == 0
    assert month_index(_utc(2026, 1, 1), start) == 10


def test_axis_labels():
    labels = axis_labels()
    assert len(labels) == 13
    assert labels[0] == "Dec 2024"
    assert labels[1] == "Jan 2025"
    assert labels[-1] == "Dec 2025"


def test_axis_month_wraps_year():
    assert axis_month(0) == (2024, 12)
    assert axis_month(1) == (2025, 1)
    assert axis_month(12) == (2025, 12)


def test_monthly_max_picks_highest_per_month(sample_history):
    buckets = monthly_max(sample_history)
    assert buckets[0] == 93_000
    assert buckets[1] == 105_000
    assert buckets[3] == 92_000
    assert buckets[5] == 111_000
    assert 6 not in buckets


def test_monthly_max_clamps_outside_window():
    buckets = monthly_max([sample(2024, 10, 1, 70_000), sample(2026, 2, 1, 200_000)])
    assert buckets == {0: 70_000, 12: 200_000}


def test_monthly_max_empty():
    assert monthly_max([]) == {}
