"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateGroupConversationCommand(Command[Conversation]):
        name: str
        creator_id: int

    class CreateGroupConversationHandler(CommandHandler[Conversation]):
        def __init__(self, uow: UnitOfWork):
            self._uow = uow

        async def execute(self, command) -> Conversation:
            async with self._uow:
                return await self._uow.conversations.create(...)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
