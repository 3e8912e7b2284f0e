"""Schemas for weekly points aggregation, summary and export."""
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from app.api.schemas.analytics import MomentumResult
from app.api.schemas.records import WeeklyPointRecord

Period = Literal["weekly", "monthly", "quarterly", "annual"]


class PointsSummary(BaseModel):
    total_all_time: int
    last_window_total: int
    weeks_tracked: int
    pillar_balance: Dict[str, int]


class PointsAggregateRequest(BaseModel):
    weeks: List[WeeklyPointRecord] = Field(default_factory=list)
    period: Period = "weekly"


class PointsAggregateResponse(BaseModel):
    period: Period
    buckets: List[WeeklyPointRecord]
    request_id: str


class PointsWeeksRequest(BaseModel):
    weeks: List[WeeklyPointRecord] = Field(default_factory=list)


class PointsSummaryResponse(BaseModel):
    summary: PointsSummary
    momentum: Optional[MomentumResult]
    request_id: str
