"""Prisma User Repository - read side of the identity service's users table."""

from typing import Optional
from prisma import Prisma
from prisma.models import User as PrismaUser
from chatcore.domain.entities.user import User
from chatcore.domain.ports.repositories import UserRepository


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        # The password column is never mapped
        return User(
            id=record.id,
            username=record.username,
            email=record.email,
            phone=record.phone,
            created_at=record.created_at,
        )

    async def get_by_id(self, user_id: int) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id})
        return self._to_entity(record) if record else None

    async def search(self, query: str, limit: int) -> list[User]:
        contains = {"contains": query, "mode": "insensitive"}
        records = await self._prisma.user.find_many(
            where={
                "OR": [
                    {"username": contains},
                    {"email": contains},
                    {"phone": contains},
                ]
            },
            order={"id": "asc"},
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def save(self, user: User) -> User:
        record = await self._prisma.user.upsert(
            where={"id": user.id},
            data={
                "create": {
                    "id": user.id,
                    "username": user.username,
                    "email": user.email,
                    "phone": user.phone,
                    "password": "",
                },
                "update": {
                    "username": user.username,
                    "email": user.email,
                    "phone": user.phone,
                },
            },
        )
        return self._to_entity(record)
