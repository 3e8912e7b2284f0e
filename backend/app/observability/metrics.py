"""Lightweight metrics helpers."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from app.core.context import get_client_id
from app.observability import client as opik_client

logger = logging.getLogger(__name__)


def log_metric(name: str, value: float | int, metadata: Optional[Dict[str, Any]] = None) -> None:
    """Record a metric as a short Opik trace if Opik is enabled."""
    client = opik_client.get_opik_client()
    if not client:
        return

    payload: Dict[str, Any] = {"value": value}
    client_id = get_client_id()
    if client_id:
        payload["client_id"] = client_id
    if metadata:
        payload.update(metadata)

    try:
        metric_trace = client.trace(name=f"metric:{name}", metadata=payload)
        metric_trace.end()
    except Exception as exc:  # pragma: no cover - metrics must not break requests
        logger.debug("Unable to record metric %s: %s", name, exc)


def log_import_metrics(kind: str, row_count: int, *, fmt: str | None = None) -> None:
    """Record the standard success/count pair emitted after every import."""
    metadata: Dict[str, Any] = {"kind": kind}
    if fmt:
        metadata["format"] = fmt
    log_metric(f"import.{kind}.success", 1, metadata=metadata)
    log_metric(f"import.{kind}.rows", row_count, metadata=metadata)
