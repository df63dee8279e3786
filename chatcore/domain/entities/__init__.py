"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chatcore.domain.entities.conversation import Conversation, private_pair_key
from chatcore.domain.entities.participation import Participation
from chatcore.domain.entities.message import Message
from chatcore.domain.entities.user import User

__all__ = [
    "Conversation",
    "private_pair_key",
    "Participation",
    "Message",
    "User",
]
