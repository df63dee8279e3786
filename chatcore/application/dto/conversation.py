"""Conversation DTOs for API response."""

from datetime import datetime
from typing import Optional

from chatcore.application.dto.base import CamelModel
from chatcore.domain.entities.conversation import Conversation


class ConversationSummaryDTO(CamelModel):
    conversation_id: int
    kind: str
    name: Optional[str] = None
    created_at: datetime
    last_message_at: Optional[datetime] = None
    participant_count: int = 0

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationSummaryDTO":
        return cls(
            conversation_id=conversation.id,
            kind=conversation.kind.value,
            name=conversation.name,
            created_at=conversation.created_at,
            last_message_at=conversation.last_message_at,
            participant_count=conversation.participant_count,
        )
