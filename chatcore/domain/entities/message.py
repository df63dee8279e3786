"""
Message Entity - a single message in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chatcore.domain.value_objects.message_body import MessageBody, TextBody


@dataclass
class Message:
    id: Optional[int]
    conversation_id: int
    sender_id: int
    body: MessageBody
    created_at: Optional[datetime] = None
    sender_name: Optional[str] = None

    @property
    def type(self) -> str:
        return self.body.type

    @property
    def content(self) -> str:
        return self.body.content

    def is_sent_by(self, user_id: int) -> bool:
        return self.sender_id == user_id

    @classmethod
    def text(
        cls,
        conversation_id: int,
        sender_id: int,
        content: str,
        created_at: Optional[datetime] = None,
    ) -> Message:
        """Factory method to create an unsaved text message stamped now."""
        return cls(
            id=None,
            conversation_id=conversation_id,
            sender_id=sender_id,
            body=TextBody(content=content),
            created_at=created_at or datetime.now(timezone.utc),
        )
