"""Tests for momentum and the points summary."""
from __future__ import annotations

from typing import List

from app.api.schemas.records import WeeklyPointRecord
from app.services.momentum import calculate_momentum
from app.services.pillars import is_allowed_category, week_total
from app.services.points_summary import summarize_points


def _weeks(*totals: int) -> List[WeeklyPointRecord]:
    return [WeeklyPointRecord(week_key=f"2026-W{i + 1:02d}", label="", move=total) for i, total in enumerate(totals)]


def test_momentum_needs_two_weeks() -> None:
    assert calculate_momentum([]) is None
    assert calculate_momentum(_weeks(10)) is None


def test_momentum_undefined_on_zero_baseline() -> None:
    weeks = [
        WeeklyPointRecord(week_key="2026-W01"),
        WeeklyPointRecord(week_key="2026-W02"),
        WeeklyPointRecord(week_key="2026-W03", move=4, fuel=6),
        WeeklyPointRecord(week_key="2026-W04", move=10, breathe=10),
    ]
    assert calculate_momentum(weeks) is None


def test_momentum_compares_halves_of_trailing_window() -> None:
    result = calculate_momentum(_weeks(100, 100, 10, 10, 15, 15))

    assert result is not None
    assert result.percent_change == 50
    assert result.is_up is True
    assert result.window_size == 4


def test_momentum_odd_window_puts_extra_week_in_older_half() -> None:
    result = calculate_momentum(_weeks(10, 20, 10))

    assert result.percent_change == -33
    assert result.is_up is False
    assert result.window_size == 3


def test_momentum_rounds_half_up_and_flat_is_up() -> None:
    assert calculate_momentum(_weeks(8, 8, 9, 9)).percent_change == 13
    flat = calculate_momentum(_weeks(5, 5))
    assert flat.percent_change == 0 and flat.is_up is True


def test_momentum_sums_every_pillar() -> None:
    weeks = [
        WeeklyPointRecord(week_key="2026-W01", move=5, recover=5),
        WeeklyPointRecord(week_key="2026-W02", fuel=5, connect=5, breathe=5, misc=5),
    ]
    assert week_total(weeks[1]) == 20
    assert calculate_momentum(weeks).percent_change == 100


def test_points_summary() -> None:
    weeks = _weeks(1, 2, 3, 4, 5)
    weeks[-1] = WeeklyPointRecord(week_key="2026-W05", move=5, breathe=2)

    summary = summarize_points(weeks)

    assert summary.total_all_time == 17
    assert summary.last_window_total == 16
    assert summary.weeks_tracked == 5
    assert summary.pillar_balance == {"move": 14, "recover": 0, "fuel": 0, "connect": 0, "breathe": 2, "misc": 0}


def test_points_summary_empty() -> None:
    summary = summarize_points([])
    assert summary.total_all_time == 0
    assert set(summary.pillar_balance) == {"move", "recover", "fuel", "connect", "breathe", "misc"}


def test_category_allow_list_is_advisory_lookup() -> None:
    assert is_allowed_category("move", "strength")
    assert is_allowed_category("breathe", "Breathwork")
    assert not is_allowed_category("fuel", "Strength")
    assert not is_allowed_category("unknown", "Strength")
