"""Schemas for calendar lookups."""
from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class WeekInfoResponse(BaseModel):
    week_key: str
    label: str
    start: date
    end: date
    request_id: str
