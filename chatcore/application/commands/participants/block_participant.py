"""
Block / Unblock Participant Commands.

A BLOCKED participant keeps its membership row but cannot send. Blocking
twice is a conflict; unblocking an ACTIVE participant is a no-op.
"""

import logging
from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
)
from chatcore.domain.entities.participation import Participation
from chatcore.domain.policies.authorization import can_change_block_status, require
from chatcore.domain.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockParticipantCommand(Command[Participation]):
    actor_id: int
    conversation_id: int
    user_id: int


@dataclass(frozen=True)
class UnblockParticipantCommand(Command[Participation]):
    actor_id: int
    conversation_id: int
    user_id: int


async def _load_for_block_change(uow: UnitOfWork, command) -> Participation:
    conversation = await get_conversation_or_404(uow, command.conversation_id)
    target = await get_participation_or_404(
        uow, command.conversation_id, command.user_id
    )
    actor = await get_participation_or_404(
        uow, command.conversation_id, command.actor_id
    )
    require(can_change_block_status(actor, target, conversation.kind))
    return target


class BlockParticipantHandler(CommandHandler[Participation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: BlockParticipantCommand) -> Participation:
        async with self._uow:
            target = await _load_for_block_change(self._uow, command)
            target.block()
            await self._uow.participants.upsert(target)

        logger.info(
            "User %s blocked %s in conversation %s",
            command.actor_id,
            command.user_id,
            command.conversation_id,
        )
        return target


class UnblockParticipantHandler(CommandHandler[Participation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: UnblockParticipantCommand) -> Participation:
        async with self._uow:
            target = await _load_for_block_change(self._uow, command)
            if target.unblock():
                await self._uow.participants.upsert(target)

        return target
