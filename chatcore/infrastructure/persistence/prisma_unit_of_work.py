"""
Prisma Unit of Work - one interactive transaction per use case.

Repositories are bound to the transaction client on enter, so every
read and write of a handler shares the same connection and isolation.
The transaction manager commits on a clean exit and rolls back on any
exception, cancellation included.
"""

import logging
from datetime import timedelta
from prisma import Prisma
from chatcore.config.settings import Config
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from chatcore.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from chatcore.infrastructure.persistence.prisma_participation_repository import (
    PrismaParticipationRepository,
)
from chatcore.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)

logger = logging.getLogger(__name__)


class PrismaUnitOfWork(UnitOfWork):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma
        self._transaction = None

    async def __aenter__(self) -> "PrismaUnitOfWork":
        self._transaction = self._prisma.tx(
            max_wait=timedelta(milliseconds=Config.DB_TX_MAX_WAIT_MS),
            timeout=timedelta(milliseconds=Config.DB_TX_TIMEOUT_MS),
        )
        client = await self._transaction.__aenter__()
        self.conversations = PrismaConversationRepository(client)
        self.participants = PrismaParticipationRepository(client)
        self.messages = PrismaMessageRepository(client)
        self.users = PrismaUserRepository(client)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.debug("Rolling back transaction: %s", exc_type.__name__)
        try:
            await self._transaction.__aexit__(exc_type, exc, tb)
        finally:
            self._transaction = None
