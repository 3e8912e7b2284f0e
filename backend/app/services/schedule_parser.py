"""Extract scheduled workout days from the text layer of a vendor schedule PDF."""
from __future__ import annotations

import logging
import re
from datetime import date
from typing import List, Optional, Tuple

from app.api.schemas.records import ParsedScheduleDay
from app.services.numbers import parse_number_or
from app.services.pillars import is_allowed_category

logger = logging.getLogger(__name__)

MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

_MONTH_ALT = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"

# A title never runs into the next "Day <n> <Mon>" marker.
DAY_ENTRY_RE = re.compile(
    r"\bDay\s+(?P<day_number>\d+)\s+"
    rf"(?P<month>{_MONTH_ALT})\s+"
    r"(?P<day>\d{1,2})\s+"
    rf"(?P<title>(?:(?!\bDay\s+\d+\s+{_MONTH_ALT}\b).)+?)\s+"
    r"(?P<duration>\d+(?:\.\d+)?|[-–—?]+)\s*min\b",
    re.IGNORECASE | re.DOTALL,
)

DEFAULT_CLASSIFICATION = ("move", "General Activity")

# Evaluated top to bottom; specific patterns must precede the general ones they overlap.
CLASSIFICATION_RULES: List[Tuple[re.Pattern[str], str, str]] = [
    (re.compile(r"\brest\s+day\b|\bday\s+off\b", re.I), "recover", "Rest Day"),
    (re.compile(r"recovery|regen|foam\s*roll|soft\s+tissue", re.I), "recover", "Recovery"),
    (re.compile(r"mobility|stretch|yoga|flexib|prehab|movement\s+prep", re.I), "recover", "Mobility"),
    (re.compile(r"\brun\b|running|tempo|interval|sprint|stride|fartlek|jog", re.I), "move", "Running"),
    (
        re.compile(r"conditioning|metcon|circuit|hiit|\berg\b|rower|sled|airdyne|assault\s+bike", re.I),
        "move",
        "Conditioning",
    ),
    (
        re.compile(
            r"strength|power|hypertrophy|\b(?:upper|lower|full\s+body)\b|\b(?:push|pull|squat|hinge|press)\b",
            re.I,
        ),
        "move",
        "Strength",
    ),
    (re.compile(r"\bswim|\bbike\b|cycling|\bride\b|spin", re.I), "move", "Swim / Bike"),
]


def classify_title(title: str) -> Tuple[str, str]:
    """Return ``(pillar, category)`` for a workout title; first matching rule wins."""
    for pattern, pillar, category in CLASSIFICATION_RULES:
        if pattern.search(title):
            return pillar, category
    return DEFAULT_CLASSIFICATION


def normalize_title(raw: str) -> str:
    return re.sub(r"\s+", " ", raw).strip()


def resolve_year(month: int, today: date) -> int:
    """Schedules omit the year; months well behind ``today`` belong to next year."""
    if month < today.month - 1:
        return today.year + 1
    return today.year


def points_for_duration(minutes: int) -> int:
    """One point per completed hour, never less than one."""
    return max(1, minutes // 60)


def parse_schedule_text(text: str, today: Optional[date] = None) -> List[ParsedScheduleDay]:
    """Parse every ``Day <n> <Mon> <dd> <title> <n> min`` entry in ``text``.

    Returns an empty list when nothing matches; the caller decides how to tell
    the operator the document was not a recognised schedule.
    """
    today = today or date.today()
    days: List[ParsedScheduleDay] = []

    for match in DAY_ENTRY_RE.finditer(text or ""):
        month = MONTHS.index(match.group("month").lower()) + 1
        year = resolve_year(month, today)
        try:
            date_key = date(year, month, int(match.group("day")))
        except ValueError:
            logger.warning("Skipping schedule entry with impossible date: %r", match.group(0)[:80])
            continue

        title = normalize_title(match.group("title"))
        duration = int(parse_number_or(match.group("duration"), 0))
        pillar, category = classify_title(title)
        if not is_allowed_category(pillar, category):
            logger.warning("Category %r is not on the %s list (title %r)", category, pillar, title)

        days.append(
            ParsedScheduleDay(
                date_key=date_key,
                day_number=int(match.group("day_number")),
                pillar=pillar,
                category=category,
                title=title,
                points=points_for_duration(duration),
                notes=f"{duration} min" if duration > 0 else "",
            )
        )

    if not days:
        logger.warning("No schedule entries detected in %d characters of text", len(text or ""))
    else:
        logger.info("Parsed %d schedule entries", len(days))
    return days
