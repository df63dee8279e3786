"""List Participants Query."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
)
from chatcore.domain.entities.participation import Participation
from chatcore.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class ListParticipantsQuery(Query[list[Participation]]):
    conversation_id: int
    actor_id: int


class ListParticipantsHandler(QueryHandler[list[Participation]]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, query: ListParticipantsQuery) -> list[Participation]:
        async with self._uow:
            await get_conversation_or_404(self._uow, query.conversation_id)
            await get_participation_or_404(
                self._uow, query.conversation_id, query.actor_id
            )
            return await self._uow.participants.list_by_conversation(
                query.conversation_id
            )
