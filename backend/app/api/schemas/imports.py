"""Schemas for schedule and points imports."""
from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from app.api.schemas.records import ParsedScheduleDay, WeeklyPointRecord
from app.core.config import settings


class ScheduleImportRequest(BaseModel):
    text: str = Field(..., max_length=settings.max_import_chars)
    today: Optional[date] = None


class ScheduleImportResponse(BaseModel):
    days: List[ParsedScheduleDay]
    count: int
    schedule_detected: bool
    request_id: str


class PointsCsvImportRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=settings.max_import_chars)


class PointsCsvImportResponse(BaseModel):
    format: Literal["native", "vendor"]
    rows: List[WeeklyPointRecord]
    count: int
    request_id: str
