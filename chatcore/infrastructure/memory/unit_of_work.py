import logging

from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.infrastructure.memory.repositories import (
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryParticipationRepository,
    InMemoryUserRepository,
)
from chatcore.infrastructure.memory.store import InMemoryStore

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Serialises transactions on the store lock.

    A snapshot is taken on enter and restored if the block raises, which
    covers cancellation as well (CancelledError reaches __aexit__).
    """

    def __init__(self, store: InMemoryStore):
        self._store = store
        self._snapshot = None
        self.conversations = InMemoryConversationRepository(store)
        self.participants = InMemoryParticipationRepository(store)
        self.messages = InMemoryMessageRepository(store)
        self.users = InMemoryUserRepository(store)

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        await self._store.lock.acquire()
        self._snapshot = self._store.snapshot()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is not None:
                logger.debug("Rolling back in-memory transaction: %s", exc_type.__name__)
                self._store.restore(self._snapshot)
        finally:
            self._snapshot = None
            self._store.lock.release()
