"""Add Participant Command - an Admin adds a user with an optional role."""

import logging
from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
    get_user_or_404,
)
from chatcore.domain.entities.participation import Participation
from chatcore.domain.exceptions import AlreadyParticipantError, DomainValidationError
from chatcore.domain.policies.authorization import can_add_participant, require
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.domain.value_objects.participant_role import ParticipantRole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddParticipantCommand(Command[Participation]):
    actor_id: int
    conversation_id: int
    user_id: int
    role: Optional[str] = None


class AddParticipantHandler(CommandHandler[Participation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, command: AddParticipantCommand) -> Participation:
        try:
            role = ParticipantRole.parse(command.role)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        async with self._uow:
            await get_conversation_or_404(self._uow, command.conversation_id)
            actor = await get_participation_or_404(
                self._uow, command.conversation_id, command.actor_id
            )
            require(can_add_participant(actor))

            user = await get_user_or_404(self._uow, command.user_id)
            if await self._uow.participants.get(command.conversation_id, user.id):
                raise AlreadyParticipantError(user.id, command.conversation_id)

            participation = Participation(
                conversation_id=command.conversation_id,
                user_id=user.id,
                role=role,
                username=user.username,
            )
            await self._uow.participants.add(participation)

        logger.info(
            "User %s added %s to conversation %s",
            command.actor_id,
            user.id,
            command.conversation_id,
        )
        return participation
