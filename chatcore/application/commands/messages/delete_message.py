"""Delete Message Commands - by its sender, or by a conversation Admin."""

import logging
from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import get_participation_or_404
from chatcore.domain.entities.message import Message
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.policies.authorization import (
    can_delete_any_message,
    can_delete_own_message,
    require,
)
from chatcore.domain.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def _get_message_or_404(
    uow: UnitOfWork, message_id: int, conversation_id: Optional[int]
) -> Message:
    message = await uow.messages.get_by_id(message_id)
    # A message addressed through the wrong conversation does not exist there
    if not message or (
        conversation_id is not None and message.conversation_id != conversation_id
    ):
        raise EntityNotFoundError(f"Message {message_id} not found")
    return message


@dataclass(frozen=True)
class DeleteMessageCommand(Command[bool]):
    message_id: int
    actor_id: int
    conversation_id: Optional[int] = None


class DeleteMessageHandler(CommandHandler[bool]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: DeleteMessageCommand) -> bool:
        async with self._uow:
            message = await _get_message_or_404(
                self._uow, command.message_id, command.conversation_id
            )
            require(can_delete_own_message(message, command.actor_id))
            return await self._uow.messages.delete(message.id)


@dataclass(frozen=True)
class DeleteMessageAsAdminCommand(Command[bool]):
    actor_id: int
    message_id: int
    conversation_id: Optional[int] = None


class DeleteMessageAsAdminHandler(CommandHandler[bool]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: DeleteMessageAsAdminCommand) -> bool:
        async with self._uow:
            message = await _get_message_or_404(
                self._uow, command.message_id, command.conversation_id
            )
            actor = await get_participation_or_404(
                self._uow, message.conversation_id, command.actor_id
            )
            require(can_delete_any_message(actor))
            deleted = await self._uow.messages.delete(message.id)

        logger.info(
            "Admin %s deleted message %s in conversation %s",
            command.actor_id,
            message.id,
            message.conversation_id,
        )
        return deleted
