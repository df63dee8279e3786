"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports and the
transactional unit of work that ties them together. Importing this
package requires a generated Prisma client (`prisma generate`).
"""

from chatcore.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from chatcore.infrastructure.persistence.prisma_participation_repository import (
    PrismaParticipationRepository,
)
from chatcore.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from chatcore.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from chatcore.infrastructure.persistence.prisma_unit_of_work import PrismaUnitOfWork

__all__ = [
    "PrismaConversationRepository",
    "PrismaParticipationRepository",
    "PrismaMessageRepository",
    "PrismaUserRepository",
    "PrismaUnitOfWork",
]
