"""
Prisma Message Repository Implementation.

Mapping:
- Prisma model fields: id, conversation_id, sender_id, type, content, created_at
- Domain entity: Message whose body is rebuilt from (type, content)
"""

from datetime import datetime, timezone
from typing import Optional
from prisma import Prisma
from prisma.models import Message as PrismaMessage
from chatcore.domain.entities.message import Message
from chatcore.domain.ports.repositories import MessageRepository
from chatcore.domain.value_objects.message_body import body_from_record


class PrismaMessageRepository(MessageRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=record.id,
            conversation_id=record.conversation_id,
            sender_id=record.sender_id,
            body=body_from_record(record.type, record.content),
            created_at=record.created_at,
            sender_name=record.sender.username if record.sender else None,
        )

    async def append(self, message: Message) -> Message:
        record = await self._prisma.message.create(
            data={
                "conversation_id": message.conversation_id,
                "sender_id": message.sender_id,
                "type": message.type,
                "content": message.content,
                "created_at": message.created_at or datetime.now(timezone.utc),
            }
        )
        return self._to_entity(record)

    async def list_by_conversation(
        self, conversation_id: int, with_sender: bool = False
    ) -> list[Message]:
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id},
            order=[{"created_at": "asc"}, {"id": "asc"}],
            include={"sender": True} if with_sender else None,
        )
        return [self._to_entity(record) for record in records]

    async def get_by_id(self, message_id: int) -> Optional[Message]:
        record = await self._prisma.message.find_unique(where={"id": message_id})
        return self._to_entity(record) if record else None

    async def delete(self, message_id: int) -> bool:
        """Hard delete. Returns True if a row was removed."""
        record = await self._prisma.message.delete(where={"id": message_id})
        return record is not None
