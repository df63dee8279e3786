"""List Messages Query - conversation history, oldest first, with sender names."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
)
from chatcore.domain.entities.message import Message
from chatcore.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    conversation_id: int
    actor_id: int


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        async with self._uow:
            await get_conversation_or_404(self._uow, query.conversation_id)
            await get_participation_or_404(
                self._uow, query.conversation_id, query.actor_id
            )
            return await self._uow.messages.list_by_conversation(
                query.conversation_id, with_sender=True
            )
