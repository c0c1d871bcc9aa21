"""Tests for the compound-growth projection."""
import pytest

from monitor.projection import growth_factor, project_path, required_growth_pct


def test_scenario_monthly_growth():
    g = growth_factor(90_000, 180_000, 6)
    assert g == pytest.approx(1.1225, abs=1e-4)


def test_path_ends_on_target():
    path = project_path(90_000, 180_000, 6)
    assert len(path) == 6
    assert path[-1] == pytest.approx(180_000)


def test_path_is_compound():
    path = project_path(100_000, 121_000, 2)
    assert path[0] == pytest.approx(110_000)
    assert path[1] == pytest.approx(121_000)


@pytest.mark.parametrize("current,target,months", [
    (50_000, 180_000, 12),
    (179_999, 180_000, 1),
    (10_000, 180_000, 3),
])
def test_path_final_point_various(current, target, months):
    assert project_path(current, target, months)[-1] == pytest.approx(target)


def test_zero_months_collapses_to_target():
    assert project_path(90_000, 180_000, 0) == [180_000]


def test_above_target_descends_to_target():
    path = project_path(200_000, 180_000, 4)
    assert all(a > b for a, b in zip(path, path[1:]))
    assert path[-1] == pytest.approx(180_000)


def test_invalid_inputs():
    with pytest.raises(ValueError):
        project_path(0, 180_000, 3)
    with pytest.raises(ValueError):
        project_path(90_000, -1, 3)
    with pytest.raises(ValueError):
        project_path(90_000, 180_000, -1)
    with pytest.raises(ValueError):
        growth_factor(90_000, 180_000, 0)


def test_required_growth_positive_below_target():
    pct = required_growth_pct(90_000, 180_000, 6)
    assert pct == pytest.approx(12.246, abs=1e-3)


@pytest.mark.parametrize("current,periods", [
    (180_000, 30),
    (185_000, 30),
    (90_000, 0),
    (90_000, -5),
])
def test_required_growth_zero_when_met_or_no_time(current, periods):
    assert required_growth_pct(current, 180_000, periods) == 0


def test_required_growth_never_negative():
    for current in [1_000, 50_000, 179_000, 180_000, 250_000]:
        for periods in [0, 1, 30, 365]:
            assert required_growth_pct(current, 180_000, periods) >= 0
