"""Row lookups shared by handlers: missing rows become NotFound errors."""

from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.participation import Participation
from chatcore.domain.entities.user import User
from chatcore.domain.exceptions import EntityNotFoundError, NotAParticipantError
from chatcore.domain.ports.unit_of_work import UnitOfWork


async def get_conversation_or_404(uow: UnitOfWork, conversation_id: int) -> Conversation:
    conversation = await uow.conversations.get_by_id(conversation_id)
    if not conversation:
        raise EntityNotFoundError(f"Conversation {conversation_id} not found")
    return conversation


async def get_participation_or_404(
    uow: UnitOfWork, conversation_id: int, user_id: int
) -> Participation:
    participation = await uow.participants.get(conversation_id, user_id)
    if not participation:
        raise NotAParticipantError(user_id, conversation_id)
    return participation


async def get_user_or_404(uow: UnitOfWork, user_id: int) -> User:
    user = await uow.users.get_by_id(user_id)
    if not user:
        raise EntityNotFoundError(f"User {user_id} not found")
    return user
