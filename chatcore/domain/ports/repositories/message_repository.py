"""
Message Repository Port - append-only per-conversation message log.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatcore.domain.entities.message import Message


class MessageRepository(ABC):
    @abstractmethod
    async def append(self, message: Message) -> Message: ...

    @abstractmethod
    async def list_by_conversation(
        self, conversation_id: int, with_sender: bool = False
    ) -> list[Message]:
        """Messages oldest first. with_sender fills Message.sender_name."""
        ...

    @abstractmethod
    async def get_by_id(self, message_id: int) -> Optional[Message]: ...

    @abstractmethod
    async def delete(self, message_id: int) -> bool: ...
