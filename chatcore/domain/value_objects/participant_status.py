"""
ParticipantStatus Value Object - ACTIVE or BLOCKED.
"""

from enum import Enum


class ParticipantStatus(str, Enum):
    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"

    def __str__(self) -> str:
        return self.value
