"""
ConversationKind Value Object - private (two people) or group.
"""

from enum import Enum


class ConversationKind(str, Enum):
    PRIVATE = "private"
    GROUP = "group"

    def __str__(self) -> str:
        return self.value
