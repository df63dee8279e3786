"""
Unit of Work Port - one store transaction per use case.

Usage:
    async with uow:
        conversation = await uow.conversations.get_by_id(conversation_id)
        await uow.messages.append(message)

Leaving the block normally commits. Leaving it with any exception,
cancellation included, rolls everything back.
"""

from abc import ABC, abstractmethod

from chatcore.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    ParticipationRepository,
    UserRepository,
)


class UnitOfWork(ABC):
    conversations: ConversationRepository
    participants: ParticipationRepository
    messages: MessageRepository
    users: UserRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork": ...

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None: ...
