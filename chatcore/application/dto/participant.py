"""Participant DTOs for API response."""

from datetime import datetime
from typing import Optional

from chatcore.application.dto.base import CamelModel
from chatcore.domain.entities.participation import Participation


class ParticipantDTO(CamelModel):
    conversation_id: int
    user_id: int
    username: Optional[str] = None
    role: Optional[str] = None
    status: str
    joined_at: datetime
    custom_name: Optional[str] = None

    @classmethod
    def from_entity(cls, participation: Participation) -> "ParticipantDTO":
        return cls(
            conversation_id=participation.conversation_id,
            user_id=participation.user_id,
            username=participation.username,
            role=participation.role.value if participation.role else None,
            status=participation.status.value,
            joined_at=participation.joined_at,
            custom_name=participation.custom_name,
        )
