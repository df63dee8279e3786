"""
API Routers - FastAPI endpoint definitions.
"""

from chatcore.presentation.api.users import router as users_router
from chatcore.presentation.api.conversations import router as conversations_router
from chatcore.presentation.api.participants import router as participants_router
from chatcore.presentation.api.messages import router as messages_router
from chatcore.presentation.api.realtime import router as realtime_router
from chatcore.presentation.api.metrics import router as metrics_router

__all__ = [
    "users_router",
    "conversations_router",
    "participants_router",
    "messages_router",
    "realtime_router",
    "metrics_router",
]
