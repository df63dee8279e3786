"""
ParticipantRole Value Object.

A participation with no role (None) is a plain member. Admin is the only
privileged role and grants moderation rights inside one conversation.
"""

from enum import Enum
from typing import Optional


class ParticipantRole(str, Enum):
    ADMIN = "Admin"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ParticipantRole"]:
        """Map a stored/requested role string to a role, None meaning member."""
        if value is None or value == "":
            return None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid participant role: {value}") from None
