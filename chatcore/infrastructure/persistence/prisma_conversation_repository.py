"""
Prisma Conversation Repository Implementation.

Mapping:
- Prisma model fields: id, kind, name, created_by, created_at,
  last_message_at, private_pair
- participant_count comes from the included participants relation
- A unique violation on private_pair means another transaction created the
  same private conversation first
"""

from datetime import datetime
from typing import Optional
from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import Conversation as PrismaConversation
from chatcore.domain.entities.conversation import Conversation, private_pair_key
from chatcore.domain.exceptions import DuplicateConversationError
from chatcore.domain.ports.repositories import ConversationRepository
from chatcore.domain.value_objects.conversation_kind import ConversationKind

_WITH_PARTICIPANTS = {"participants": True}


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=record.id,
            kind=ConversationKind(record.kind),
            name=record.name,
            created_by=record.created_by,
            created_at=record.created_at,
            last_message_at=record.last_message_at,
            private_pair=record.private_pair,
            participant_count=len(record.participants or []),
        )

    async def create(self, conversation: Conversation) -> Conversation:
        try:
            record = await self._prisma.conversation.create(
                data={
                    "kind": conversation.kind.value,
                    "name": conversation.name,
                    "created_by": conversation.created_by,
                    "created_at": conversation.created_at,
                    "private_pair": conversation.private_pair,
                },
                include=_WITH_PARTICIPANTS,
            )
        except UniqueViolationError as e:
            raise DuplicateConversationError() from e
        return self._to_entity(record)

    async def get_by_id(self, conversation_id: int) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id}, include=_WITH_PARTICIPANTS
        )
        return self._to_entity(record) if record else None

    async def find_by_user_id(self, user_id: int) -> list[Conversation]:
        records = await self._prisma.conversation.find_many(
            where={"participants": {"some": {"user_id": user_id}}},
            order=[{"created_at": "desc"}, {"id": "desc"}],
            include=_WITH_PARTICIPANTS,
        )
        return [self._to_entity(record) for record in records]

    async def find_with_messages(self, user_id: int) -> list[Conversation]:
        """Conversations with at least one message, most recent activity first."""
        records = await self._prisma.conversation.find_many(
            where={
                "participants": {"some": {"user_id": user_id}},
                "messages": {"some": {}},
            },
            order=[{"last_message_at": "desc"}, {"id": "desc"}],
            include=_WITH_PARTICIPANTS,
        )
        return [self._to_entity(record) for record in records]

    async def find_without_messages(self, user_id: int) -> list[Conversation]:
        records = await self._prisma.conversation.find_many(
            where={
                "participants": {"some": {"user_id": user_id}},
                "messages": {"none": {}},
            },
            order=[{"created_at": "desc"}, {"id": "desc"}],
            include=_WITH_PARTICIPANTS,
        )
        return [self._to_entity(record) for record in records]

    async def exists_private_between(self, user_id1: int, user_id2: int) -> bool:
        count = await self._prisma.conversation.count(
            where={"private_pair": private_pair_key(user_id1, user_id2)}
        )
        return count > 0

    async def update_last_message_at(
        self, conversation_id: int, timestamp: datetime
    ) -> None:
        await self._prisma.conversation.update(
            where={"id": conversation_id}, data={"last_message_at": timestamp}
        )

    async def rename(self, conversation_id: int, name: str) -> None:
        await self._prisma.conversation.update(
            where={"id": conversation_id}, data={"name": name}
        )

    async def release_private_pair(self, conversation_id: int) -> None:
        await self._prisma.conversation.update(
            where={"id": conversation_id}, data={"private_pair": None}
        )
