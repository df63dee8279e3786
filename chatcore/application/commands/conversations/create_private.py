"""
Create Private Conversation Command.

At most one private conversation exists per unordered pair of users.
The existence check covers the common case; two concurrent creators for
the same pair are separated by the store's unique private_pair key, and
the loser gets DuplicateConversationError.

Display names: the creator sees the supplied custom name (or the other
user's phone), the other user sees the creator's phone.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import get_user_or_404
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.participation import Participation
from chatcore.domain.exceptions import DuplicateConversationError, SelfConversationError
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.utils.validation import validate_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatePrivateConversationCommand(Command[Conversation]):
    user_id1: int
    user_id2: int
    custom_name: Optional[str] = None


class CreatePrivateConversationHandler(CommandHandler[Conversation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: CreatePrivateConversationCommand) -> Conversation:
        if command.user_id1 == command.user_id2:
            raise SelfConversationError()

        custom_name = None
        if command.custom_name is not None:
            custom_name = validate_name(command.custom_name)

        async with self._uow:
            user1 = await get_user_or_404(self._uow, command.user_id1)
            user2 = await get_user_or_404(self._uow, command.user_id2)

            if await self._uow.conversations.exists_private_between(user1.id, user2.id):
                raise DuplicateConversationError(
                    f"Private conversation between {user1.id} and {user2.id} already exists"
                )

            conversation = await self._uow.conversations.create(
                Conversation.new_private(user1.id, user2.id)
            )
            await self._uow.participants.add(
                Participation(
                    conversation_id=conversation.id,
                    user_id=user1.id,
                    custom_name=custom_name or user2.phone,
                )
            )
            await self._uow.participants.add(
                Participation(
                    conversation_id=conversation.id,
                    user_id=user2.id,
                    custom_name=user1.phone,
                )
            )
            created = await self._uow.conversations.get_by_id(conversation.id)

        logger.info(
            "Created private conversation %s between %s and %s",
            created.id,
            user1.id,
            user2.id,
        )
        return created
