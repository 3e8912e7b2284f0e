"""Tests for metrics and tracing helpers."""
from __future__ import annotations

from typing import Any, Dict

import pytest

from app.core.context import client_id_ctx_var
from app.observability import client as client_module
from app.observability import metrics
from app.observability import tracing


class _DummyTrace:
    def __init__(self, name: str, metadata: Dict[str, Any]):
        self.name = name
        self.metadata = metadata
        self.ended = False
        self.error_info: Dict[str, Any] | None = None

    def update(self, error_info: Dict[str, Any] | None = None, **_: Any) -> None:
        self.error_info = error_info

    def end(self) -> None:
        self.ended = True


class _DummyClient:
    def __init__(self):
        self.traces: list[_DummyTrace] = []

    def trace(self, name: str, metadata: Dict[str, Any] | None = None):
        trace = _DummyTrace(name, metadata or {})
        self.traces.append(trace)
        return trace


@pytest.fixture()
def dummy_client(monkeypatch) -> _DummyClient:
    dummy = _DummyClient()
    monkeypatch.setattr(client_module, "get_opik_client", lambda: dummy)
    return dummy


def test_log_metric_closes_trace(dummy_client) -> None:
    metrics.log_metric("demo_metric", 42, metadata={"foo": "bar"})

    assert dummy_client.traces, "Metric call should record a trace"
    assert dummy_client.traces[0].name == "metric:demo_metric"
    assert dummy_client.traces[0].metadata["value"] == 42
    assert dummy_client.traces[0].metadata["foo"] == "bar"
    assert dummy_client.traces[0].ended is True


def test_log_metric_tags_current_client(dummy_client) -> None:
    token = client_id_ctx_var.set("client-7")
    try:
        metrics.log_metric("demo_metric", 1)
    finally:
        client_id_ctx_var.reset(token)

    assert dummy_client.traces[0].metadata["client_id"] == "client-7"


def test_log_import_metrics_records_success_and_rows(dummy_client) -> None:
    metrics.log_import_metrics("points_csv", 3, fmt="vendor")

    names = [trace.name for trace in dummy_client.traces]
    assert names == ["metric:import.points_csv.success", "metric:import.points_csv.rows"]
    assert dummy_client.traces[1].metadata == {"value": 3, "kind": "points_csv", "format": "vendor"}


def test_trace_records_errors_and_reraises(dummy_client) -> None:
    with pytest.raises(ValueError):
        with tracing.trace("imports.points_csv", metadata={"rows": 0}, client_id="client-1", request_id="req-1"):
            raise ValueError("Missing required column: week")

    recorded = dummy_client.traces[0]
    assert recorded.metadata == {"rows": 0, "client_id": "client-1", "request_id": "req-1"}
    assert recorded.error_info == {"exception_type": "ValueError", "message": "Missing required column: week"}
    assert recorded.ended is True


def test_metrics_are_noop_without_client(monkeypatch) -> None:
    monkeypatch.setattr(client_module, "get_opik_client", lambda: None)

    metrics.log_metric("ignored", 1)
    with tracing.trace("ignored") as span:
        assert span is None
