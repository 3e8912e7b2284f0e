"""Schemas for compliance and momentum analytics."""
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.records import ScheduledTask, WeeklyPointRecord


class WeeklyRate(BaseModel):
    week: str
    week_label: str
    rate: int
    done: int
    total: int


class ComplianceSummary(BaseModel):
    overall: int
    recent_rate: int
    weekly_rates: List[WeeklyRate]


class MomentumResult(BaseModel):
    percent_change: int
    is_up: bool
    window_size: int


class ComplianceRequest(BaseModel):
    assignments: Dict[date, List[ScheduledTask]] = Field(default_factory=dict)
    start_date: Optional[date] = None


class ComplianceResponse(BaseModel):
    compliance: Optional[ComplianceSummary]
    request_id: str


class MomentumRequest(BaseModel):
    weeks: List[WeeklyPointRecord] = Field(default_factory=list)


class MomentumResponse(BaseModel):
    momentum: Optional[MomentumResult]
    request_id: str
