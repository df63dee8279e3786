"""
List Conversations Query.

Scopes:
- USER: every conversation the user participates in
- CHATS: those with at least one message, most recent activity first
- CONTACTS: those without any message yet, newest first
"""

from dataclasses import dataclass
from enum import Enum

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.ports.unit_of_work import UnitOfWork


class ConversationScope(str, Enum):
    USER = "user"
    CHATS = "chats"
    CONTACTS = "contacts"


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    user_id: int
    scope: ConversationScope = ConversationScope.USER


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        async with self._uow:
            if query.scope == ConversationScope.CHATS:
                return await self._uow.conversations.find_with_messages(query.user_id)
            if query.scope == ConversationScope.CONTACTS:
                return await self._uow.conversations.find_without_messages(
                    query.user_id
                )
            return await self._uow.conversations.find_by_user_id(query.user_id)
