"""Prisma Participation Repository - rows keyed by (conversation_id, user_id)."""

from typing import Optional
from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import Participation as PrismaParticipation
from chatcore.domain.entities.participation import Participation
from chatcore.domain.exceptions import AlreadyParticipantError
from chatcore.domain.ports.repositories import ParticipationRepository
from chatcore.domain.value_objects.participant_role import ParticipantRole
from chatcore.domain.value_objects.participant_status import ParticipantStatus
from chatcore.domain.value_objects.participation_key import ParticipationKey


def _key(conversation_id: int, user_id: int) -> dict:
    return {
        "conversation_id_user_id": {
            "conversation_id": conversation_id,
            "user_id": user_id,
        }
    }


def _row_key(key: ParticipationKey) -> dict:
    return _key(key.conversation_id, key.user_id)


class PrismaParticipationRepository(ParticipationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaParticipation) -> Participation:
        return Participation(
            conversation_id=record.conversation_id,
            user_id=record.user_id,
            role=ParticipantRole.parse(record.role),
            status=ParticipantStatus(record.status),
            joined_at=record.joined_at,
            custom_name=record.custom_name,
            username=record.user.username if record.user else None,
        )

    async def get(self, conversation_id: int, user_id: int) -> Optional[Participation]:
        record = await self._prisma.participation.find_unique(
            where=_key(conversation_id, user_id), include={"user": True}
        )
        return self._to_entity(record) if record else None

    async def list_by_conversation(self, conversation_id: int) -> list[Participation]:
        records = await self._prisma.participation.find_many(
            where={"conversation_id": conversation_id},
            order=[{"joined_at": "asc"}, {"user_id": "asc"}],
            include={"user": True},
        )
        return [self._to_entity(record) for record in records]

    async def add(self, participation: Participation) -> None:
        try:
            await self._prisma.participation.create(
                data={
                    "conversation_id": participation.conversation_id,
                    "user_id": participation.user_id,
                    "role": participation.role.value if participation.role else None,
                    "status": participation.status.value,
                    "joined_at": participation.joined_at,
                    "custom_name": participation.custom_name,
                }
            )
        except UniqueViolationError as e:
            raise AlreadyParticipantError(
                participation.user_id, participation.conversation_id
            ) from e

    async def upsert(self, participation: Participation) -> None:
        role = participation.role.value if participation.role else None
        await self._prisma.participation.upsert(
            where=_row_key(participation.key),
            data={
                "create": {
                    "conversation_id": participation.conversation_id,
                    "user_id": participation.user_id,
                    "role": role,
                    "status": participation.status.value,
                    "joined_at": participation.joined_at,
                    "custom_name": participation.custom_name,
                },
                "update": {
                    "role": role,
                    "status": participation.status.value,
                    "custom_name": participation.custom_name,
                },
            },
        )

    async def remove(self, conversation_id: int, user_id: int) -> bool:
        record = await self._prisma.participation.delete(
            where=_key(conversation_id, user_id)
        )
        return record is not None
