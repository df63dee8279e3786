"""
Prometheus Metrics for the chat core.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Gauge: Value goes up/down (e.g., live WebSocket subscribers)
    - Counter: Value only goes up (e.g., messages sent)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
ACTIVE_SUBSCRIBERS = Gauge(
    "chat_active_subscribers", "Number of live conversation subscribers"
)

REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

MESSAGES_SENT_TOTAL = Counter(
    "chat_messages_sent_total",
    "Total number of messages persisted",
    ["kind"],
)

FANOUT_DELIVERED_TOTAL = Counter(
    "chat_fanout_delivered_total",
    "Deliveries handed to live subscribers",
)

FANOUT_DROPPED_TOTAL = Counter(
    "chat_fanout_dropped_total",
    "Deliveries dropped for a subscriber whose queue was full",
)

ERRORS_TOTAL = Counter(
    "chat_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsErrorType:
    """Error type labels for chat_errors_total metric."""

    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    INTERNAL = "internal"
    FANOUT_FAILED = "fanout_failed"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_active_subscribers():
    """Call when a WebSocket subscription starts."""
    ACTIVE_SUBSCRIBERS.inc()


def decrement_active_subscribers():
    """Call when a WebSocket subscription ends (in finally block)."""
    ACTIVE_SUBSCRIBERS.dec()


def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Integration point: presentation/middleware/metrics_middleware.py"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_messages_sent(kind: str):
    MESSAGES_SENT_TOTAL.labels(kind=kind).inc()


def increment_fanout_delivered(count: int = 1):
    FANOUT_DELIVERED_TOTAL.inc(count)


def increment_fanout_dropped(count: int = 1):
    FANOUT_DROPPED_TOTAL.inc(count)


def increment_error(error_type: str):
    """
    Call to record an error occurrence.

    Integration points:
        - fastapi_app.py exception handlers: not_found, access_denied, ...
        - services/fanout.py: fanout_failed
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "increment_active_subscribers",
    "decrement_active_subscribers",
    "observe_request_latency",
    "increment_messages_sent",
    "increment_fanout_delivered",
    "increment_fanout_dropped",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
