"""Tests for chart series assembly."""
import pytest
from datetime import datetime, timezone

from web.chart_data import build_chart_snapshot, empty_snapshot
from utils.constants import AXIS_SLOTS, LAST_SLOT


def test_series_lengths(mid_2025):
    snap = build_chart_snapshot({}, 90_000, mid_2025)
    for series in (snap.labels, snap.historical, snap.projected, snap.target):
        assert len(series) == AXIS_SLOTS


def test_historical_uses_buckets_and_current_price(mid_2025):
    buckets = {0: 93_000, 1: 105_000, 6: 99_000}
    snap = build_chart_snapshot(buckets, 90_000, mid_2025)
    assert snap.current_slot == 6
    assert snap.historical[0] == 93_000
    assert snap.historical[1] == 105_000
    assert snap.historical[2] is None
    assert snap.historical[6] == 90_000
    assert all(p is None for p in snap.historical[7:])


def test_projection_starts_at_current_slot(mid_2025):
    snap = build_chart_snapshot({}, 90_000, mid_2025)
    assert all(p is None for p in snap.projected[:6])
    assert snap.projected[6] == 90_000
    assert snap.projected[7] == pytest.approx(90_000 * 2 ** (1 / 6))
    assert snap.projected[LAST_SLOT] == pytest.approx(180_000)


def test_target_only_at_last_slot(mid_2025):
    snap = build_chart_snapshot({}, 90_000, mid_2025)
    assert snap.target[LAST_SLOT] == 180_000
    assert all(p is None for p in snap.target[:LAST_SLOT])


def test_current_slot_is_last():
    now = datetime(2025, 12, 10, tzinfo=timezone.utc)
    snap = build_chart_snapshot({}, 150_000, now)
    assert snap.current_slot == LAST_SLOT
    assert snap.historical[LAST_SLOT] == 150_000
    assert snap.projected[LAST_SLOT] == 180_000
    assert all(p is None for p in snap.projected[:LAST_SLOT])


def test_to_dict_lists(mid_2025):
    d = build_chart_snapshot({}, 90_000, mid_2025).to_dict()
    assert isinstance(d["historical"], list)
    assert d["labels"][0] == "Dec 2024"
    assert d["current_slot"] == 6


def test_empty_snapshot():
    snap = empty_snapshot()
    assert all(p is None for p in snap.historical)
    assert snap.target[LAST_SLOT] == 180_000
