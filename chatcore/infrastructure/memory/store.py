import asyncio
import copy
from typing import Any

from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.message import Message
from chatcore.domain.entities.participation import Participation
from chatcore.domain.entities.user import User


class InMemoryStore:
    """Process-wide tables plus the lock that serialises transactions."""

    def __init__(self):
        self.users: dict[int, User] = {}
        self.conversations: dict[int, Conversation] = {}
        self.participations: dict[tuple[int, int], Participation] = {}
        self.messages: dict[int, Message] = {}
        self.sequences: dict[str, int] = {"user": 0, "conversation": 0, "message": 0}
        self.lock = asyncio.Lock()

    def next_id(self, table: str) -> int:
        self.sequences[table] += 1
        return self.sequences[table]

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(
            {
                "users": self.users,
                "conversations": self.conversations,
                "participations": self.participations,
                "messages": self.messages,
                "sequences": self.sequences,
            }
        )

    def restore(self, snapshot: dict[str, Any]) -> None:
        self.users = snapshot["users"]
        self.conversations = snapshot["conversations"]
        self.participations = snapshot["participations"]
        self.messages = snapshot["messages"]
        self.sequences = snapshot["sequences"]
