"""Week-over-week momentum of weekly point totals."""
from __future__ import annotations

import math
from typing import Optional, Sequence

from app.api.schemas.analytics import MomentumResult
from app.api.schemas.records import WeeklyPointRecord
from app.services.numbers import round_half_up
from app.services.pillars import week_total

MOMENTUM_WINDOW = 4


def _average_total(weeks: Sequence[WeeklyPointRecord]) -> float:
    return sum(week_total(week) for week in weeks) / len(weeks)


def calculate_momentum(
    weeks: Sequence[WeeklyPointRecord],
    window: int = MOMENTUM_WINDOW,
) -> Optional[MomentumResult]:
    """Compare the older and newer halves of the trailing window.

    ``weeks`` must be in chronological order. Returns ``None`` with fewer than
    two weeks or when the older half averaged zero points.
    """
    if len(weeks) < 2:
        return None

    trailing = list(weeks)[-max(window, 2):]
    split = math.ceil(len(trailing) / 2)
    older_avg = _average_total(trailing[:split])
    newer_avg = _average_total(trailing[split:])
    if older_avg == 0:
        return None

    percent_change = round_half_up((newer_avg - older_avg) / older_avg * 100)
    return MomentumResult(
        percent_change=percent_change,
        is_up=percent_change >= 0,
        window_size=len(trailing),
    )
