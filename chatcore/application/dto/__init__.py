"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- conversation.py → ConversationSummaryDTO
- message.py → MessageDTO
- participant.py → ParticipantDTO
- user.py → UserDTO

Note: These are different from domain entities.
DTOs are for API output (camelCase on the wire), entities are for business logic.
"""

from chatcore.application.dto.conversation import ConversationSummaryDTO
from chatcore.application.dto.message import MessageDTO
from chatcore.application.dto.participant import ParticipantDTO
from chatcore.application.dto.user import UserDTO

__all__ = [
    "ConversationSummaryDTO",
    "MessageDTO",
    "ParticipantDTO",
    "UserDTO",
]
