"""Observability package for the chat core."""

from chatcore.observability.metrics import (
    increment_active_subscribers,
    decrement_active_subscribers,
    observe_request_latency,
    increment_messages_sent,
    increment_fanout_delivered,
    increment_fanout_dropped,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
)

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
