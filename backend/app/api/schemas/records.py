"""Canonical program records shared by parsers, calculators and routes."""
from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

Pillar = Literal["move", "recover", "fuel", "connect", "breathe", "misc"]


class ScheduledTask(BaseModel):
    date_key: date
    pillar: Pillar
    category: str
    title: str
    points: int = Field(default=0, ge=0)
    notes: str = ""
    done: bool = False


class ParsedScheduleDay(ScheduledTask):
    day_number: int


class WeeklyPointRecord(BaseModel):
    """Point totals for one ISO week (or, after aggregation, one period)."""

    week_key: str = Field(..., min_length=1)
    label: str = ""
    move: int = Field(default=0, ge=0)
    recover: int = Field(default=0, ge=0)
    fuel: int = Field(default=0, ge=0)
    connect: int = Field(default=0, ge=0)
    breathe: int = Field(default=0, ge=0)
    misc: int = Field(default=0, ge=0)
