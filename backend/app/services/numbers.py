"""Lenient number parsing and rounding shared by importers and calculators."""
from __future__ import annotations

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def parse_number_or(value: Any, fallback: float = 0) -> float:
    """Return the leading number in ``value`` or ``fallback`` when there is none.

    Mirrors spreadsheet-style leniency: ``"12.5 pts"`` is 12.5, ``""`` and
    ``"n/a"`` fall back. A bad cell never raises.
    """
    if value is None:
        return fallback
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return fallback
    if isinstance(value, float):
        return value if math.isfinite(value) else fallback

    match = _NUMBER_PREFIX.match(str(value))
    if not match:
        if str(value).strip():
            logger.debug("Non-numeric cell %r defaulted to %s", value, fallback)
        return fallback
    number = float(match.group(0))
    if not math.isfinite(number):
        logger.debug("Out-of-range cell %r defaulted to %s", value, fallback)
        return fallback
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)
