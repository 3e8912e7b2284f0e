"""Schedule and weekly-points import routes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status

from app.api.schemas.imports import (
    PointsCsvImportRequest,
    PointsCsvImportResponse,
    ScheduleImportRequest,
    ScheduleImportResponse,
)
from app.observability.metrics import log_import_metrics
from app.observability.tracing import trace
from app.services.csv_importer import CsvImportError, parse_points_csv
from app.services.schedule_parser import parse_schedule_text

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/imports/schedule", response_model=ScheduleImportResponse, tags=["imports"])
def import_schedule(payload: ScheduleImportRequest, http_request: Request) -> ScheduleImportResponse:
    """Parse the text layer of a vendor schedule PDF into scheduled tasks.

    Nothing is stored; the caller reviews the preview and creates assignments.
    """
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "imports.schedule",
        metadata={"route": "/imports/schedule", "text_length": len(payload.text)},
        request_id=request_id,
    ) as span:
        days = parse_schedule_text(payload.text, today=payload.today)
        if span:
            try:
                span.update(metadata={"days_detected": len(days)})
            except Exception:  # pragma: no cover - best-effort
                logger.debug("Unable to update schedule import trace", exc_info=True)

    log_import_metrics("schedule", len(days))
    return ScheduleImportResponse(
        days=days,
        count=len(days),
        schedule_detected=bool(days),
        request_id=request_id or "",
    )


@router.post("/imports/points-csv", response_model=PointsCsvImportResponse, tags=["imports"])
def import_points_csv(payload: PointsCsvImportRequest, http_request: Request) -> PointsCsvImportResponse:
    """Parse a native or vendor weekly-points CSV into candidate weekly records."""
    request_id = getattr(http_request.state, "request_id", None)

    try:
        with trace(
            "imports.points_csv",
            metadata={"route": "/imports/points-csv", "text_length": len(payload.text)},
            request_id=request_id,
        ):
            fmt, rows = parse_points_csv(payload.text)
    except CsvImportError as exc:
        logger.info("Rejected points CSV: %s", exc)
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    log_import_metrics("points_csv", len(rows), fmt=fmt)
    return PointsCsvImportResponse(format=fmt, rows=rows, count=len(rows), request_id=request_id or "")
