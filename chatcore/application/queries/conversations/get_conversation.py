"""Get Conversation Query. Only participants can see a conversation."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.common.lookups import (
    get_conversation_or_404,
    get_participation_or_404,
)
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class GetConversationQuery(Query[Conversation]):
    conversation_id: int
    actor_id: int


class GetConversationHandler(QueryHandler[Conversation]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, query: GetConversationQuery) -> Conversation:
        async with self._uow:
            conversation = await get_conversation_or_404(self._uow, query.conversation_id)
            await get_participation_or_404(
                self._uow, query.conversation_id, query.actor_id
            )
        return conversation
