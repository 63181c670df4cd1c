"""Metrics for the text-patch MCP server.

OpenTelemetry instruments exported through a Prometheus reader:

- mcp_tool_calls_total: tool calls by tool and status
- mcp_tool_duration_seconds: wall time of each tool call
- patch_operations_total: fs_patch calls by operation and outcome

Nothing is recorded until ``ensure_metrics_initialized`` has run with metrics
enabled. Diagnostics go to the module logger, never to stdout, which belongs
to the stdio transport.
"""
from __future__ import annotations

import logging
import os
import socket
import time
from typing import Any

from opentelemetry import metrics
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import Resource
from prometheus_client import CONTENT_TYPE_LATEST
from prometheus_client import generate_latest

logger = logging.getLogger(__name__)

SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "text-patch-mcp")
SERVICE_VERSION = os.getenv("OTEL_SERVICE_VERSION", "1.0.0")
DEPLOYMENT_ENVIRONMENT = os.getenv("DEPLOYMENT_ENVIRONMENT", "local")

PATCH_OUTCOMES = ("applied", "swap_degraded", "no_match", "no_swap_target")


def is_test_environment() -> bool:
    """Detect pytest and CI runs, where metrics default to off."""
    return any(name in os.environ for name in ("PYTEST_CURRENT_TEST", "CI", "GITHUB_ACTIONS"))


METRICS_ENABLED = (
    os.getenv("MCP_METRICS_ENABLED", "false" if is_test_environment() else "true").lower() == "true"
)
DEBUG_METRICS = os.getenv("MCP_METRICS_DEBUG", "false").lower() == "true"

meter = None
prometheus_reader = None
tool_calls_counter = None
tool_duration_histogram = None
patch_operations_counter = None

# Start times of tool calls still running, keyed by tool name and start time
_in_flight: dict[str, float] = {}
_metrics_initialized = False


def _debug(message: str, *args: Any) -> None:
    if DEBUG_METRICS:
        logger.debug("[METRICS] " + message, *args)


def get_resource() -> Resource:
    return Resource.create(
        {
            "service.name": SERVICE_NAME,
            "service.version": SERVICE_VERSION,
            "deployment.environment": DEPLOYMENT_ENVIRONMENT,
            "host.name": socket.gethostname(),
        }
    )


def initialize_metrics() -> None:
    """Create the meter provider, the Prometheus reader and all instruments."""
    global meter, prometheus_reader, tool_calls_counter, tool_duration_histogram, patch_operations_counter

    if not METRICS_ENABLED:
        _debug("Telemetry disabled")
        return

    try:
        prometheus_reader = PrometheusMetricReader()
        metrics.set_meter_provider(
            MeterProvider(resource=get_resource(), metric_readers=[prometheus_reader])
        )
        meter = metrics.get_meter(__name__)

        tool_calls_counter = meter.create_counter(
            name="mcp_tool_calls_total",
            description="MCP tool calls by tool and status",
            unit="1",
        )
        tool_duration_histogram = meter.create_histogram(
            name="mcp_tool_duration_seconds",
            description="Wall time of MCP tool calls",
            unit="s",
        )
        patch_operations_counter = meter.create_counter(
            name="patch_operations_total",
            description="Patch operations by operation and outcome",
            unit="1",
        )
        _debug("Initialized %s v%s (%s)", SERVICE_NAME, SERVICE_VERSION, DEPLOYMENT_ENVIRONMENT)
    except Exception as e:
        # Metrics are optional; the server keeps running without them
        logger.warning("Metrics initialization failed: %s", e)
        meter = None


def is_metrics_enabled() -> bool:
    return METRICS_ENABLED and meter is not None


def record_tool_call_start(tool_name: str, args: tuple, kwargs: dict) -> float | None:
    """Mark a tool call as started and return its start time, or None when disabled."""
    if not is_metrics_enabled():
        return None

    start_time = time.perf_counter()
    _in_flight[f"{tool_name}:{start_time}"] = start_time
    return start_time


def _finish_tool_call(tool_name: str, start_time: float | None, status: str) -> None:
    if not is_metrics_enabled():
        return

    attributes = {"tool_name": tool_name, "status": status, "environment": DEPLOYMENT_ENVIRONMENT}
    try:
        if tool_calls_counter is not None:
            tool_calls_counter.add(1, attributes)
        if start_time is not None:
            _in_flight.pop(f"{tool_name}:{start_time}", None)
            if tool_duration_histogram is not None:
                tool_duration_histogram.record(time.perf_counter() - start_time, attributes)
    except Exception as e:
        _debug("Recording %s call failed: %s", tool_name, e)


def record_tool_call_success(tool_name: str, start_time: float | None, result_size: int = 0) -> None:
    _finish_tool_call(tool_name, start_time, "success")


def record_tool_call_error(tool_name: str, start_time: float | None, error: Exception) -> None:
    _finish_tool_call(tool_name, start_time, "error")


def record_patch_outcome(operation: str, outcome: str) -> None:
    """Count one fs_patch call.

    ``outcome`` is one of PATCH_OUTCOMES.
    """
    if not is_metrics_enabled() or patch_operations_counter is None:
        return

    try:
        patch_operations_counter.add(1, {"operation": operation, "outcome": outcome})
    except Exception as e:
        _debug("Recording patch outcome failed: %s", e)


def get_metrics_export() -> tuple[str, str]:
    """Return the Prometheus exposition text and its content type."""
    if not is_metrics_enabled() or prometheus_reader is None:
        return "# Metrics not available\n", "text/plain"

    try:
        return generate_latest().decode("utf-8"), CONTENT_TYPE_LATEST
    except Exception as e:
        return f"# Error: {e}\n", "text/plain"


def get_metrics_summary() -> dict[str, Any]:
    if not is_metrics_enabled():
        return {"status": "disabled"}

    return {
        "status": "active",
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": DEPLOYMENT_ENVIRONMENT,
        "tool_calls_in_flight": len(_in_flight),
    }


def ensure_metrics_initialized(enabled: bool = True) -> None:
    """Initialize metrics once, on server start."""
    global _metrics_initialized
    if _metrics_initialized:
        return

    if enabled and METRICS_ENABLED and not is_test_environment():
        initialize_metrics()
    _metrics_initialized = True
