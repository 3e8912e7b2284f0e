"""Headline point totals for the client overview."""
from __future__ import annotations

from typing import Sequence

from app.api.schemas.points import PointsSummary
from app.api.schemas.records import WeeklyPointRecord
from app.services.pillars import PILLAR_IDS, week_total

SUMMARY_WINDOW = 4


def summarize_points(weeks: Sequence[WeeklyPointRecord], window: int = SUMMARY_WINDOW) -> PointsSummary:
    trailing = list(weeks)[-window:] if window > 0 else []
    return PointsSummary(
        total_all_time=sum(week_total(week) for week in weeks),
        last_window_total=sum(week_total(week) for week in trailing),
        weeks_tracked=len(weeks),
        pillar_balance={pillar: sum(getattr(week, pillar) for week in trailing) for pillar in PILLAR_IDS},
    )
