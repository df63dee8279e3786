"""Conversation queries."""

from .get_conversation import GetConversationQuery, GetConversationHandler
from .list_conversations import (
    ConversationScope,
    ListConversationsQuery,
    ListConversationsHandler,
)

__all__ = [
    "GetConversationQuery",
    "GetConversationHandler",
    "ConversationScope",
    "ListConversationsQuery",
    "ListConversationsHandler",
]
