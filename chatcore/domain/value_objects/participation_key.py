"""
ParticipationKey Value Object - composite identity of a membership row.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParticipationKey:
    conversation_id: int
    user_id: int

    def __post_init__(self):
        if self.conversation_id <= 0 or self.user_id <= 0:
            raise ValueError(
                f"Invalid participation key: ({self.conversation_id}, {self.user_id})"
            )

    def __str__(self) -> str:
        return f"{self.conversation_id}:{self.user_id}"
