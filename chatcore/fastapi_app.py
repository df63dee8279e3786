"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Domain exceptions are mapped to HTTP responses here, once, so routers stay
free of try/except. Every error body is {"error": <message>}.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from chatcore import __version__
from chatcore.config.logging_config import setup_logging
from chatcore.config.settings import Config
from chatcore.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatcore.observability.metrics import MetricsErrorType, increment_error
from chatcore.presentation.api import (
    conversations_router,
    messages_router,
    metrics_router,
    participants_router,
    realtime_router,
    users_router,
)
from chatcore.presentation.middleware import CorrelationIdMiddleware, MetricsMiddleware
from chatcore.setup.ioc.container import create_container

logger = logging.getLogger(__name__)

# Domain exception → (HTTP status, metrics label)
_DOMAIN_ERRORS = {
    EntityNotFoundError: (404, MetricsErrorType.NOT_FOUND),
    AccessDeniedError: (403, MetricsErrorType.ACCESS_DENIED),
    ConflictError: (409, MetricsErrorType.CONFLICT),
    DomainValidationError: (400, MetricsErrorType.VALIDATION),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container and Dishka already set up by the factory
    - Shutdown: close DI container (disconnects Prisma / Redis)
    """
    logger.info(
        "Chat core started (storage=%s, fanout=%s)",
        Config.STORAGE_BACKEND,
        Config.FANOUT_BACKEND,
    )
    yield
    await app.state.dishka_container.close()
    logger.info("Chat core shutdown. DI container closed.")


def _register_exception_handlers(app: FastAPI) -> None:
    def domain_handler(status_code: int, error_type: str):
        async def handler(request: Request, exc: Exception):
            increment_error(error_type)
            logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
            return JSONResponse(status_code=status_code, content={"error": str(exc)})

        return handler

    for exc_class, (status_code, error_type) in _DOMAIN_ERRORS.items():
        app.add_exception_handler(exc_class, domain_handler(status_code, error_type))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        increment_error(MetricsErrorType.VALIDATION)
        errors = jsonable_encoder(exc.errors())
        logger.info("Validation error on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        increment_error(MetricsErrorType.INTERNAL)
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; built from Config when omitted

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    app = FastAPI(
        title="Chat Core API",
        description="Conversations, membership and realtime message delivery",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Chat core is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers (static /api/conversations/... paths before /{conversation_id})
    app.include_router(users_router)  # GET /api/conversations/search/users
    app.include_router(participants_router)  # /api/conversations/participants/...
    app.include_router(conversations_router)
    app.include_router(messages_router)
    app.include_router(realtime_router)  # WS /ws/conversations/{id}
    app.include_router(metrics_router)  # GET /metrics

    return app
