"""Completion-rate statistics over scheduled tasks."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence

from app.api.schemas.analytics import ComplianceSummary, WeeklyRate
from app.api.schemas.records import ScheduledTask
from app.services.numbers import round_half_up
from app.services.week_calendar import iso_week_key, week_label

RECENT_WEEKS = 4


@dataclass
class _WeekBucket:
    sort_key: int | str
    label: str
    total: int = 0
    done: int = 0


def _percent(done: int, total: int) -> int:
    return round_half_up(done / total * 100) if total else 0


def _bucket_for(day: date, start_date: Optional[date]) -> Optional[_WeekBucket]:
    if start_date is None:
        key = iso_week_key(day)
        return _WeekBucket(sort_key=key, label=week_label(key))
    if day < start_date:
        return None
    week_number = (day - start_date).days // 7 + 1
    return _WeekBucket(sort_key=week_number, label=f"Week {week_number}")


def calculate_compliance(
    assignments: Mapping[date, Sequence[ScheduledTask]],
    start_date: Optional[date] = None,
    recent_weeks: int = RECENT_WEEKS,
) -> Optional[ComplianceSummary]:
    """Summarise how many scheduled tasks were marked done, overall and per week.

    Weeks count from ``start_date`` when given (earlier dates are ignored),
    otherwise they are calendar ISO weeks. Returns ``None`` for no assignments.
    """
    if not assignments:
        return None

    buckets: Dict[int | str, _WeekBucket] = {}
    for day, tasks in assignments.items():
        candidate = _bucket_for(day, start_date)
        if candidate is None:
            continue
        bucket = buckets.setdefault(candidate.sort_key, candidate)
        bucket.total += len(tasks)
        bucket.done += sum(1 for task in tasks if task.done)

    ordered: List[_WeekBucket] = [buckets[key] for key in sorted(buckets)]
    recent = ordered[-recent_weeks:] if recent_weeks > 0 else []

    return ComplianceSummary(
        overall=_percent(sum(b.done for b in ordered), sum(b.total for b in ordered)),
        recent_rate=_percent(sum(b.done for b in recent), sum(b.total for b in recent)),
        weekly_rates=[
            WeeklyRate(
                week=str(bucket.sort_key),
                week_label=bucket.label,
                rate=_percent(bucket.done, bucket.total),
                done=bucket.done,
                total=bucket.total,
            )
            for bucket in ordered
        ],
    )
