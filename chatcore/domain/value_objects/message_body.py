"""
MessageBody Value Object - tagged payload of a message.

Only the text variant exists today. New kinds are added as new tagged
dataclasses and registered in _BODY_TYPES, never as Message subclasses.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union


@dataclass(frozen=True)
class TextBody:
    content: str
    type: Literal["text"] = "text"

    def __post_init__(self):
        if self.content is None:
            raise ValueError("Text message content cannot be None")


MessageBody = Union[TextBody]

_BODY_TYPES = {"text": TextBody}


def body_from_record(type: str, content: Optional[str]) -> MessageBody:
    """Rebuild a message body from its stored tag and payload columns."""
    body_cls = _BODY_TYPES.get(type)
    if body_cls is None:
        raise ValueError(f"Unsupported message type: {type}")
    return body_cls(content=content or "")
