"""
In-memory storage adapter.

Used by the test suite and for local development (STORAGE_BACKEND=memory).
Enforces the same uniqueness rules as the relational schema.
"""

from chatcore.infrastructure.memory.store import InMemoryStore
from chatcore.infrastructure.memory.repositories import (
    InMemoryConversationRepository,
    InMemoryParticipationRepository,
    InMemoryMessageRepository,
    InMemoryUserRepository,
)
from chatcore.infrastructure.memory.unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryStore",
    "InMemoryConversationRepository",
    "InMemoryParticipationRepository",
    "InMemoryMessageRepository",
    "InMemoryUserRepository",
    "InMemoryUnitOfWork",
]
