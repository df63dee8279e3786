"""
Participation Entity - membership of one user in one conversation.

The row's existence is the membership itself. BLOCKED keeps the row but
suspends the user's interaction; removing the user deletes the row.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from chatcore.domain.exceptions.conflict import AlreadyBlockedError
from chatcore.domain.value_objects.participant_role import ParticipantRole
from chatcore.domain.value_objects.participant_status import ParticipantStatus
from chatcore.domain.value_objects.participation_key import ParticipationKey


@dataclass
class Participation:
    conversation_id: int
    user_id: int
    role: Optional[ParticipantRole] = None
    status: ParticipantStatus = ParticipantStatus.ACTIVE
    joined_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    custom_name: Optional[str] = None
    # Filled by stores that join the users table
    username: Optional[str] = None

    @property
    def key(self) -> ParticipationKey:
        return ParticipationKey(self.conversation_id, self.user_id)

    @property
    def is_admin(self) -> bool:
        return self.role == ParticipantRole.ADMIN

    @property
    def is_blocked(self) -> bool:
        return self.status == ParticipantStatus.BLOCKED

    def promote(self) -> bool:
        """Make this participant an Admin. Returns False if it already was."""
        if self.is_admin:
            return False
        self.role = ParticipantRole.ADMIN
        return True

    def block(self) -> None:
        if self.is_blocked:
            raise AlreadyBlockedError(
                f"User {self.user_id} is already blocked in conversation "
                f"{self.conversation_id}"
            )
        self.status = ParticipantStatus.BLOCKED

    def unblock(self) -> bool:
        """BLOCKED -> ACTIVE. Returns False when there was nothing to do."""
        if not self.is_blocked:
            return False
        self.status = ParticipantStatus.ACTIVE
        return True
