"""
Remove Participant Command.

Anyone may leave; only an Admin may remove someone else, and never
another Admin. Leaving a private conversation frees its pair key so the
two users can start a new one.
"""

import logging
from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
)
from chatcore.domain.policies.authorization import can_remove_participant, require
from chatcore.domain.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveParticipantCommand(Command[bool]):
    actor_id: int
    conversation_id: int
    target_user_id: int


class RemoveParticipantHandler(CommandHandler[bool]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: RemoveParticipantCommand) -> bool:
        async with self._uow:
            conversation = await get_conversation_or_404(
                self._uow, command.conversation_id
            )
            actor = await get_participation_or_404(
                self._uow, command.conversation_id, command.actor_id
            )
            target = await get_participation_or_404(
                self._uow, command.conversation_id, command.target_user_id
            )
            require(can_remove_participant(actor, target))

            removed = await self._uow.participants.remove(
                command.conversation_id, command.target_user_id
            )
            if conversation.is_private:
                await self._uow.conversations.release_private_pair(conversation.id)

        logger.info(
            "User %s removed %s from conversation %s",
            command.actor_id,
            command.target_user_id,
            command.conversation_id,
        )
        return removed
