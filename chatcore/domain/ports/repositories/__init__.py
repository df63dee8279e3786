"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations. Repositories are always
reached through a UnitOfWork so every use case runs in one transaction.
"""

from chatcore.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from chatcore.domain.ports.repositories.participation_repository import (
    ParticipationRepository,
)
from chatcore.domain.ports.repositories.message_repository import MessageRepository
from chatcore.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "ConversationRepository",
    "ParticipationRepository",
    "MessageRepository",
    "UserRepository",
]
