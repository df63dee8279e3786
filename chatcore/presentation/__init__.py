"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers (HTTP and WebSocket)
- dependencies/: auth dependencies injected into routes
- middleware/: correlation id and request metrics
"""
