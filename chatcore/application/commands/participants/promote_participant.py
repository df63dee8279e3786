"""Promote Participant Command - make a participant an Admin (idempotent)."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
)
from chatcore.domain.entities.participation import Participation
from chatcore.domain.policies.authorization import can_promote, require
from chatcore.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class PromoteParticipantCommand(Command[Participation]):
    actor_id: int
    conversation_id: int
    target_user_id: int


class PromoteParticipantHandler(CommandHandler[Participation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: PromoteParticipantCommand) -> Participation:
        async with self._uow:
            await get_conversation_or_404(self._uow, command.conversation_id)
            actor = await get_participation_or_404(
                self._uow, command.conversation_id, command.actor_id
            )
            target = await get_participation_or_404(
                self._uow, command.conversation_id, command.target_user_id
            )
            require(can_promote(actor))

            if target.promote():
                await self._uow.participants.upsert(target)

        return target
