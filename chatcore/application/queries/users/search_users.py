"""Search Users Query - substring search over username, email and phone."""

from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.config.settings import Config
from chatcore.domain.entities.user import User
from chatcore.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class SearchUsersQuery(Query[list[User]]):
    query: str
    limit: Optional[int] = None


class SearchUsersHandler(QueryHandler[list[User]]):
    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def execute(self, query: SearchUsersQuery) -> list[User]:
        text = (query.query or "").strip()
        if not text:
            return []
        async with self._uow:
            return await self._uow.users.search(
                text, query.limit or Config.USER_SEARCH_LIMIT
            )
