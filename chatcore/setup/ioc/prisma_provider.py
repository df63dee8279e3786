"""Prisma storage provider (STORAGE_BACKEND=prisma)."""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from chatcore.config.settings import Config
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.infrastructure.persistence import PrismaUnitOfWork


class PrismaStorageProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - connected on first use, disconnected when the container closes
        """
        prisma = Prisma(datasource={"url": Config.DATABASE_URL}) if Config.DATABASE_URL else Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, prisma: Prisma) -> UnitOfWork:
        return PrismaUnitOfWork(prisma)
