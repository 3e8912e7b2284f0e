"""Calendar lookup routes for week keys and labels."""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from app.api.schemas.calendar import WeekInfoResponse
from app.services.week_calendar import iso_week_key, week_bounds, week_label

router = APIRouter()


def _week_info(week_key: str, request_id: Optional[str]) -> WeekInfoResponse:
    try:
        start, end = week_bounds(week_key)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return WeekInfoResponse(
        week_key=week_key.strip().upper(),
        label=week_label(week_key),
        start=start,
        end=end,
        request_id=request_id or "",
    )


@router.get("/calendar/week", response_model=WeekInfoResponse, tags=["calendar"])
def get_week_for_date(
    http_request: Request,
    on: Optional[date] = Query(default=None, description="Date inside the week; defaults to today"),
) -> WeekInfoResponse:
    request_id = getattr(http_request.state, "request_id", None)
    return _week_info(iso_week_key(on or date.today()), request_id)


@router.get("/calendar/weeks/{week_key}", response_model=WeekInfoResponse, tags=["calendar"])
def get_week(week_key: str, http_request: Request) -> WeekInfoResponse:
    request_id = getattr(http_request.state, "request_id", None)
    return _week_info(week_key, request_id)
