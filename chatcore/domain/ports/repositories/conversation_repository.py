"""
Conversation Repository Port - Interface for conversation persistence.
Implementations:
- chatcore/infrastructure/persistence/prisma_conversation_repository.py
- chatcore/infrastructure/memory/repositories.py
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from chatcore.domain.entities.conversation import Conversation


class ConversationRepository(ABC):
    @abstractmethod
    async def create(self, conversation: Conversation) -> Conversation:
        """Insert and return the stored conversation with its id assigned.

        Raises DuplicateConversationError when the private pair key is taken.
        """
        ...

    @abstractmethod
    async def get_by_id(self, conversation_id: int) -> Optional[Conversation]: ...

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> list[Conversation]: ...

    @abstractmethod
    async def find_with_messages(self, user_id: int) -> list[Conversation]: ...

    @abstractmethod
    async def find_without_messages(self, user_id: int) -> list[Conversation]: ...

    @abstractmethod
    async def exists_private_between(self, user_id1: int, user_id2: int) -> bool: ...

    @abstractmethod
    async def update_last_message_at(
        self, conversation_id: int, timestamp: datetime
    ) -> None: ...

    @abstractmethod
    async def rename(self, conversation_id: int, name: str) -> None: ...

    @abstractmethod
    async def release_private_pair(self, conversation_id: int) -> None: ...
