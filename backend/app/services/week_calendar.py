"""ISO week keys, week labels and period bucketing of weekly point records."""
from __future__ import annotations

import math
import re
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Tuple

from app.api.schemas.records import WeeklyPointRecord
from app.services.pillars import PILLAR_IDS

PERIODS = ("weekly", "monthly", "quarterly", "annual")
WEEKS_PER_MONTH = 4.33

_WEEK_KEY_PATTERN = re.compile(r"^(\d{4})-W(\d{2})$")
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def iso_week_key(day: date) -> str:
    """Return the ``YYYY-W##`` key of the ISO week containing ``day``.

    The year is the ISO year, so Dec 29-31 can belong to week 1 of the next
    year and Jan 1-3 to the last week of the previous one.
    """
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def parse_week_key(week_key: str) -> Tuple[int, int]:
    """Split a week key into ``(year, week)``, validating it exists."""
    match = _WEEK_KEY_PATTERN.match(week_key.strip().upper())
    if not match:
        raise ValueError(f"Invalid week key {week_key!r}; expected YYYY-W##.")
    year, week = int(match.group(1)), int(match.group(2))
    try:
        date.fromisocalendar(year, week, 1)
    except ValueError as exc:
        raise ValueError(f"Week {week} does not exist in ISO year {year}.") from exc
    return year, week


def week_bounds(week_key: str) -> Tuple[date, date]:
    """Return the Monday and Sunday of the given ISO week."""
    year, week = parse_week_key(week_key)
    monday = date.fromisocalendar(year, week, 1)
    return monday, monday + timedelta(days=6)


def format_short_date(day: date) -> str:
    return f"{_MONTH_ABBR[day.month - 1]} {day.day}"


def week_label(week_key: str) -> str:
    """Human-readable ``"Jan 26 – Feb 1"`` range for an ISO week key."""
    monday, sunday = week_bounds(week_key)
    return f"{format_short_date(monday)} – {format_short_date(sunday)}"


def _monthly_bucket(year: int, week: int) -> Tuple[str, str]:
    index = min(11, math.floor((week - 1) / WEEKS_PER_MONTH))
    return f"{year}-{index + 1:02d}", f"{_MONTH_ABBR[index]} {year}"


def _quarterly_bucket(year: int, week: int) -> Tuple[str, str]:
    quarter = math.ceil(week / 13)
    return f"{year}-Q{quarter}", f"Q{quarter} {year}"


def _annual_bucket(year: int, week: int) -> Tuple[str, str]:
    return str(year), str(year)


_BUCKETERS: Dict[str, Callable[[int, int], Tuple[str, str]]] = {
    "monthly": _monthly_bucket,
    "quarterly": _quarterly_bucket,
    "annual": _annual_bucket,
}


def aggregate_points(records: Iterable[WeeklyPointRecord], period: str) -> List[WeeklyPointRecord]:
    """Roll weekly point records up into monthly, quarterly or annual buckets.

    ``weekly`` returns the records unchanged. Other periods sum each pillar
    across the weeks in a bucket and return buckets sorted by key.
    """
    if period not in PERIODS:
        raise ValueError(f"Unknown period {period!r}; expected one of {', '.join(PERIODS)}.")

    records = list(records)
    if period == "weekly":
        return records

    bucketer = _BUCKETERS[period]
    buckets: Dict[str, Dict[str, int | str]] = {}
    for record in records:
        year, week = parse_week_key(record.week_key)
        key, label = bucketer(year, week)
        bucket = buckets.setdefault(key, {"label": label, **{pillar: 0 for pillar in PILLAR_IDS}})
        for pillar in PILLAR_IDS:
            bucket[pillar] += getattr(record, pillar)

    return [WeeklyPointRecord(week_key=key, **buckets[key]) for key in sorted(buckets)]
