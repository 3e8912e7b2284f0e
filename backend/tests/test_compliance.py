"""Tests for scheduled-task compliance rates."""
from __future__ import annotations

from datetime import date, timedelta
from typing import List

from app.api.schemas.records import ScheduledTask
from app.services.compliance import calculate_compliance

START = date(2026, 3, 2)


def _tasks(day: date, *done_flags: bool) -> List[ScheduledTask]:
    return [
        ScheduledTask(date_key=day, pillar="move", category="Strength", title=f"Session {i}", points=1, done=flag)
        for i, flag in enumerate(done_flags)
    ]


def test_empty_assignments_return_none() -> None:
    assert calculate_compliance({}) is None
    assert calculate_compliance({}, start_date=START) is None


def test_weeks_relative_to_start_date() -> None:
    assignments = {
        START - timedelta(days=1): _tasks(START - timedelta(days=1), True),
        START: _tasks(START, True, False),
        START + timedelta(days=2): _tasks(START + timedelta(days=2), True),
        START + timedelta(days=8): _tasks(START + timedelta(days=8), False),
        START + timedelta(days=18): [],
    }

    summary = calculate_compliance(assignments, start_date=START)

    assert summary is not None
    assert [(r.week_label, r.done, r.total, r.rate) for r in summary.weekly_rates] == [
        ("Week 1", 2, 3, 67),
        ("Week 2", 0, 1, 0),
        ("Week 3", 0, 0, 0),
    ]
    assert summary.overall == 50
    assert summary.recent_rate == 50


def test_relative_weeks_sort_numerically_regardless_of_insertion_order() -> None:
    assignments = {
        START + timedelta(days=63): _tasks(START + timedelta(days=63), True),
        START + timedelta(days=7): _tasks(START + timedelta(days=7), False),
        START: _tasks(START, True),
    }

    summary = calculate_compliance(assignments, start_date=START)

    assert [r.week for r in summary.weekly_rates] == ["1", "2", "10"]


def test_recent_rate_uses_last_four_weeks_only() -> None:
    assignments = {}
    for week in range(6):
        day = START + timedelta(days=7 * week)
        assignments[day] = _tasks(day, week < 2, week < 2)

    summary = calculate_compliance(assignments, start_date=START)

    assert len(summary.weekly_rates) == 6
    assert summary.overall == 33
    assert summary.recent_rate == 0


def test_iso_week_fallback_without_start_date() -> None:
    assignments = {
        date(2026, 1, 27): _tasks(date(2026, 1, 27), True, True, False, False),
        date(2025, 12, 31): _tasks(date(2025, 12, 31), True),
        date(2026, 1, 1): _tasks(date(2026, 1, 1), False),
    }

    summary = calculate_compliance(assignments)

    assert [(r.week, r.week_label) for r in summary.weekly_rates] == [
        ("2026-W01", "Dec 29 – Jan 4"),
        ("2026-W05", "Jan 26 – Feb 1"),
    ]
    assert [r.rate for r in summary.weekly_rates] == [50, 50]
    assert summary.overall == 50


def test_only_dates_before_start_gives_zero_rates() -> None:
    summary = calculate_compliance({START - timedelta(days=3): _tasks(START, True)}, start_date=START)

    assert summary is not None
    assert summary.overall == 0
    assert summary.recent_rate == 0
    assert summary.weekly_rates == []
