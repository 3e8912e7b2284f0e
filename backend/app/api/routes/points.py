"""Weekly points aggregation, summary and export routes."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response, status

from app.api.schemas.points import (
    PointsAggregateRequest,
    PointsAggregateResponse,
    PointsSummaryResponse,
    PointsWeeksRequest,
)
from app.core.config import settings
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.csv_importer import serialize_native_csv
from app.services.momentum import calculate_momentum
from app.services.points_summary import summarize_points
from app.services.week_calendar import aggregate_points

router = APIRouter()


@router.post("/points/aggregate", response_model=PointsAggregateResponse, tags=["points"])
def aggregate_weekly_points(payload: PointsAggregateRequest, http_request: Request) -> PointsAggregateResponse:
    request_id = getattr(http_request.state, "request_id", None)

    try:
        with trace(
            "points.aggregate",
            metadata={"period": payload.period, "weeks": len(payload.weeks)},
            request_id=request_id,
        ):
            buckets = aggregate_points(payload.weeks, payload.period)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    log_metric("points.aggregate.buckets", len(buckets), metadata={"period": payload.period})
    return PointsAggregateResponse(period=payload.period, buckets=buckets, request_id=request_id or "")


@router.post("/points/summary", response_model=PointsSummaryResponse, tags=["points"])
def summarize_weekly_points(payload: PointsWeeksRequest, http_request: Request) -> PointsSummaryResponse:
    """Totals, trailing pillar balance and momentum for the overview cards."""
    request_id = getattr(http_request.state, "request_id", None)

    with trace("points.summary", metadata={"weeks": len(payload.weeks)}, request_id=request_id):
        summary = summarize_points(payload.weeks, window=settings.momentum_window_weeks)
        momentum = calculate_momentum(payload.weeks, window=settings.momentum_window_weeks)

    return PointsSummaryResponse(summary=summary, momentum=momentum, request_id=request_id or "")


@router.post("/points/export", tags=["points"], response_class=Response)
def export_weekly_points(payload: PointsWeeksRequest) -> Response:
    """Download weekly records as a native-format CSV that re-imports unchanged."""
    body = serialize_native_csv(payload.weeks)
    log_metric("points.export.rows", len(payload.weeks))
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="weekly_points.csv"'},
    )
