"""Message DTOs for API response."""

from datetime import datetime
from typing import Optional

from chatcore.application.dto.base import CamelModel
from chatcore.domain.entities.message import Message


class MessageDTO(CamelModel):
    """DTO for message data returned to clients."""

    message_id: int
    conversation_id: int
    sender_id: int
    sender_name: Optional[str] = None
    type: str
    content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            message_id=message.id,
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            sender_name=message.sender_name,
            type=message.type,
            content=message.content,
            created_at=message.created_at,
        )
