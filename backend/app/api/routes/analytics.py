"""Compliance and momentum analytics routes."""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.schemas.analytics import (
    ComplianceRequest,
    ComplianceResponse,
    MomentumRequest,
    MomentumResponse,
)
from app.core.config import settings
from app.observability.metrics import log_metric
from app.observability.tracing import trace
from app.services.compliance import calculate_compliance
from app.services.momentum import calculate_momentum

router = APIRouter()


@router.post("/analytics/compliance", response_model=ComplianceResponse, tags=["analytics"])
def get_compliance(payload: ComplianceRequest, http_request: Request) -> ComplianceResponse:
    """Return completion rates for the supplied assignments; ``compliance`` is null with no data."""
    request_id = getattr(http_request.state, "request_id", None)

    with trace(
        "analytics.compliance",
        metadata={
            "dates": len(payload.assignments),
            "start_date": payload.start_date.isoformat() if payload.start_date else None,
        },
        request_id=request_id,
    ):
        compliance = calculate_compliance(
            payload.assignments,
            start_date=payload.start_date,
            recent_weeks=settings.compliance_recent_weeks,
        )

    if compliance is not None:
        log_metric("analytics.compliance.overall", compliance.overall)
    return ComplianceResponse(compliance=compliance, request_id=request_id or "")


@router.post("/analytics/momentum", response_model=MomentumResponse, tags=["analytics"])
def get_momentum(payload: MomentumRequest, http_request: Request) -> MomentumResponse:
    request_id = getattr(http_request.state, "request_id", None)

    with trace("analytics.momentum", metadata={"weeks": len(payload.weeks)}, request_id=request_id):
        momentum = calculate_momentum(payload.weeks, window=settings.momentum_window_weeks)

    if momentum is not None:
        log_metric("analytics.momentum.percent_change", momentum.percent_change)
    return MomentumResponse(momentum=momentum, request_id=request_id or "")
