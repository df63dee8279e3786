"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or Enum)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from chatcore.domain.value_objects.conversation_kind import ConversationKind
from chatcore.domain.value_objects.participant_role import ParticipantRole
from chatcore.domain.value_objects.participant_status import ParticipantStatus
from chatcore.domain.value_objects.participation_key import ParticipationKey
from chatcore.domain.value_objects.message_body import (
    MessageBody,
    TextBody,
    body_from_record,
)
from chatcore.domain.value_objects.message_delivery import MessageDelivery

__all__ = [
    "ConversationKind",
    "ParticipantRole",
    "ParticipantStatus",
    "ParticipationKey",
    "MessageBody",
    "TextBody",
    "body_from_record",
    "MessageDelivery",
]
