"""
In-process broadcaster.

Each subscriber owns a bounded queue. Publishing never waits: when a
subscriber's queue is full the delivery is dropped for that subscriber
only, and it is expected to re-read history from the message store.
"""

import asyncio
import logging
from collections import defaultdict
from typing import AsyncIterator, Optional

from chatcore.config.settings import Config
from chatcore.domain.ports.broadcaster import MessageBroadcaster, Subscription
from chatcore.domain.value_objects.message_delivery import MessageDelivery
from chatcore.observability.metrics import (
    increment_fanout_delivered,
    increment_fanout_dropped,
)

logger = logging.getLogger(__name__)


class _QueueSubscription(Subscription):
    def __init__(self, broadcaster: "InMemoryBroadcaster", conversation_id: int):
        self._broadcaster = broadcaster
        self._conversation_id = conversation_id
        self._queue: Optional[asyncio.Queue] = None

    async def __aenter__(self) -> AsyncIterator[MessageDelivery]:
        self._queue = asyncio.Queue(maxsize=self._broadcaster.queue_size)
        self._broadcaster._register(self._conversation_id, self._queue)
        return self._iterate(self._queue)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._broadcaster._unregister(self._conversation_id, self._queue)
        self._queue = None

    @staticmethod
    async def _iterate(queue: asyncio.Queue) -> AsyncIterator[MessageDelivery]:
        while True:
            yield await queue.get()


class InMemoryBroadcaster(MessageBroadcaster):
    def __init__(self, queue_size: Optional[int] = None):
        self.queue_size = queue_size or Config.FANOUT_QUEUE_SIZE
        self._subscribers: dict[int, set[asyncio.Queue]] = defaultdict(set)

    def _register(self, conversation_id: int, queue: asyncio.Queue) -> None:
        self._subscribers[conversation_id].add(queue)

    def _unregister(self, conversation_id: int, queue: asyncio.Queue) -> None:
        queues = self._subscribers.get(conversation_id)
        if queues is None:
            return
        queues.discard(queue)
        if not queues:
            del self._subscribers[conversation_id]

    def subscriber_count(self, conversation_id: int) -> int:
        return len(self._subscribers.get(conversation_id, ()))

    async def publish(self, delivery: MessageDelivery) -> None:
        delivered = 0
        for queue in list(self._subscribers.get(delivery.conversation_id, ())):
            try:
                queue.put_nowait(delivery)
                delivered += 1
            except asyncio.QueueFull:
                increment_fanout_dropped()
                logger.warning(
                    "Subscriber queue full, dropped message %s for conversation %s",
                    delivery.message_id,
                    delivery.conversation_id,
                )
        if delivered:
            increment_fanout_delivered(delivered)

    def subscribe(self, conversation_id: int) -> Subscription:
        return _QueueSubscription(self, conversation_id)
