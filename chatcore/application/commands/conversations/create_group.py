"""Create Group Conversation Command. The creator becomes its first Admin."""

import logging
from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import get_user_or_404
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.participation import Participation
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.domain.value_objects.participant_role import ParticipantRole
from chatcore.utils.validation import validate_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateGroupConversationCommand(Command[Conversation]):
    name: str
    creator_id: int


class CreateGroupConversationHandler(CommandHandler[Conversation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: CreateGroupConversationCommand) -> Conversation:
        name = validate_name(command.name)

        async with self._uow:
            creator = await get_user_or_404(self._uow, command.creator_id)
            conversation = await self._uow.conversations.create(
                Conversation.new_group(name, creator.id)
            )
            await self._uow.participants.add(
                Participation(
                    conversation_id=conversation.id,
                    user_id=creator.id,
                    role=ParticipantRole.ADMIN,
                )
            )
            created = await self._uow.conversations.get_by_id(conversation.id)

        logger.info("User %s created group conversation %s", creator.id, created.id)
        return created
