"""
MessageDelivery Value Object - the record pushed to live subscribers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class MessageDelivery:
    message_id: int
    conversation_id: int
    sender_id: int
    sender_display_name: str
    content: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Wire format (camelCase, ISO timestamps)."""
        return {
            "messageId": self.message_id,
            "conversationId": self.conversation_id,
            "senderId": self.sender_id,
            "senderDisplayName": self.sender_display_name,
            "content": self.content,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageDelivery":
        return cls(
            message_id=int(data["messageId"]),
            conversation_id=int(data["conversationId"]),
            sender_id=int(data["senderId"]),
            sender_display_name=data["senderDisplayName"],
            content=data["content"],
            created_at=datetime.fromisoformat(data["createdAt"]),
        )
