"""Rename Group Command."""

from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
)
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.exceptions import DomainValidationError
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.utils.validation import validate_name


@dataclass(frozen=True)
class RenameGroupCommand(Command[Conversation]):
    actor_id: int
    conversation_id: int
    new_name: Optional[str]


class RenameGroupHandler(CommandHandler[Conversation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: RenameGroupCommand) -> Conversation:
        async with self._uow:
            conversation = await get_conversation_or_404(
                self._uow, command.conversation_id
            )
            await get_participation_or_404(
                self._uow, command.conversation_id, command.actor_id
            )
            if conversation.is_private:
                raise DomainValidationError("Private conversations cannot be renamed")

            if command.new_name is not None:
                name = validate_name(command.new_name)
                conversation.rename(name)
                await self._uow.conversations.rename(conversation.id, name)

        return conversation
