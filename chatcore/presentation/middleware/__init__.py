from chatcore.presentation.middleware.correlation_id import CorrelationIdMiddleware
from chatcore.presentation.middleware.metrics_middleware import MetricsMiddleware

__all__ = ["CorrelationIdMiddleware", "MetricsMiddleware"]
