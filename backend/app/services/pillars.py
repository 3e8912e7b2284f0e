"""Pillar catalog: the six tracked activity areas and their categories."""
from __future__ import annotations

from typing import Dict, Tuple

from app.api.schemas.records import WeeklyPointRecord

PILLAR_IDS: Tuple[str, ...] = ("move", "recover", "fuel", "connect", "breathe", "misc")

# Advisory only; parsers may emit categories outside these lists.
PILLAR_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "move": (
        "Strength",
        "Running",
        "Conditioning",
        "Swim / Bike",
        "Sport",
        "General Activity",
    ),
    "recover": ("Mobility", "Recovery", "Sleep", "Soft Tissue", "Rest Day"),
    "fuel": ("Nutrition", "Hydration", "Meal Prep", "Supplements"),
    "connect": ("Social", "Family", "Community", "Coaching Call"),
    "breathe": ("Breathwork", "Meditation", "Journaling"),
    "misc": ("Other",),
}


def is_allowed_category(pillar: str, category: str) -> bool:
    """Return True when ``category`` is on the allowed list for ``pillar``."""
    allowed = PILLAR_CATEGORIES.get(pillar, ())
    return category.strip().lower() in {name.lower() for name in allowed}


def week_total(record: WeeklyPointRecord) -> int:
    return sum(getattr(record, pillar) for pillar in PILLAR_IDS)
