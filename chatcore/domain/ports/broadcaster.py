"""
Broadcaster Port - live delivery of messages to conversation subscribers.

Delivery is best effort and at most once: a subscriber that is offline or
too slow misses records and re-reads history from the message store.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from chatcore.domain.value_objects.message_delivery import MessageDelivery


class Subscription(ABC):
    """Async context manager that yields an async iterator of deliveries."""

    @abstractmethod
    async def __aenter__(self) -> AsyncIterator[MessageDelivery]: ...

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None: ...


class MessageBroadcaster(ABC):
    @abstractmethod
    async def publish(self, delivery: MessageDelivery) -> None: ...

    @abstractmethod
    def subscribe(self, conversation_id: int) -> Subscription: ...
