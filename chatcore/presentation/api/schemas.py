"""Request bodies shared by the routers. Clients send camelCase keys."""

from typing import Optional

from pydantic import BaseModel

from chatcore.application.dto.base import CamelModel


class CreatePrivateConversationRequest(CamelModel):
    other_user_id: int
    custom_name: Optional[str] = None


class CreateGroupConversationRequest(CamelModel):
    name: str


class RenameConversationRequest(CamelModel):
    name: Optional[str] = None


class BlockParticipantRequest(CamelModel):
    conversation_id: int
    target_user_id: int


class AddParticipantRequest(CamelModel):
    user_id: int
    role: Optional[str] = None


class SendMessageRequest(CamelModel):
    content: str


class SuccessResponse(BaseModel):
    success: bool
