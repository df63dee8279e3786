"""
Conversation Entity - a private chat between two users or a named group.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chatcore.domain.value_objects.conversation_kind import ConversationKind


def private_pair_key(user_id1: int, user_id2: int) -> str:
    """Order-independent key identifying the private conversation of a pair."""
    low, high = sorted((user_id1, user_id2))
    return f"{low}:{high}"


@dataclass
class Conversation:
    id: Optional[int]
    kind: ConversationKind
    name: Optional[str]
    created_by: int
    created_at: datetime
    last_message_at: Optional[datetime] = None
    private_pair: Optional[str] = None
    participant_count: int = 0

    @property
    def is_private(self) -> bool:
        return self.kind == ConversationKind.PRIVATE

    @property
    def is_group(self) -> bool:
        return self.kind == ConversationKind.GROUP

    def rename(self, new_name: str) -> None:
        if self.is_private:
            raise ValueError("Private conversations cannot be renamed")
        self.name = new_name

    def touch(self, sent_at: datetime) -> None:
        self.last_message_at = sent_at

    @classmethod
    def new_private(cls, user_id1: int, user_id2: int) -> Conversation:
        """Unsaved private conversation created by user_id1."""
        return cls(
            id=None,
            kind=ConversationKind.PRIVATE,
            name=None,
            created_by=user_id1,
            created_at=datetime.now(timezone.utc),
            private_pair=private_pair_key(user_id1, user_id2),
        )

    @classmethod
    def new_group(cls, name: str, creator_id: int) -> Conversation:
        """Unsaved group conversation."""
        return cls(
            id=None,
            kind=ConversationKind.GROUP,
            name=name,
            created_by=creator_id,
            created_at=datetime.now(timezone.utc),
        )
