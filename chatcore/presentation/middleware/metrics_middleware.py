import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from chatcore.observability.metrics import observe_request_latency


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records request latency labelled by route template, not raw path."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            method=request.method,
            route=getattr(route, "path", request.url.path),
            status_code=response.status_code,
            duration=time.perf_counter() - start,
        )
        return response
