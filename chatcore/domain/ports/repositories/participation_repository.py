"""
Participation Repository Port - the membership store.

Pure persistence: no authorization here. The (conversation_id, user_id)
uniqueness is enforced by the storage layer.
"""

from abc import ABC, abstractmethod
from typing import Optional
from chatcore.domain.entities.participation import Participation


class ParticipationRepository(ABC):
    @abstractmethod
    async def get(self, conversation_id: int, user_id: int) -> Optional[Participation]: ...

    @abstractmethod
    async def list_by_conversation(self, conversation_id: int) -> list[Participation]: ...

    @abstractmethod
    async def add(self, participation: Participation) -> None:
        """Insert a new row. Raises AlreadyParticipantError on key collision."""
        ...

    @abstractmethod
    async def upsert(self, participation: Participation) -> None: ...

    @abstractmethod
    async def remove(self, conversation_id: int, user_id: int) -> bool: ...
