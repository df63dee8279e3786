"""
Redis pub/sub broadcaster.

Relays deliveries between service instances: every instance publishes to
`<prefix>:<conversation_id>` and each WebSocket subscriber listens on
that channel. Pub/sub is fire-and-forget, matching at-most-once delivery.
"""

import json
import logging
from typing import AsyncIterator, Optional

from redis.asyncio import Redis
from redis.asyncio.client import PubSub

from chatcore.config.settings import Config
from chatcore.domain.ports.broadcaster import MessageBroadcaster, Subscription
from chatcore.domain.value_objects.message_delivery import MessageDelivery
from chatcore.observability.metrics import increment_fanout_delivered

logger = logging.getLogger(__name__)


class _PubSubSubscription(Subscription):
    def __init__(self, redis: Redis, channel: str):
        self._redis = redis
        self._channel = channel
        self._pubsub: Optional[PubSub] = None

    async def __aenter__(self) -> AsyncIterator[MessageDelivery]:
        self._pubsub = self._redis.pubsub(ignore_subscribe_messages=True)
        await self._pubsub.subscribe(self._channel)
        return self._iterate(self._pubsub)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        pubsub, self._pubsub = self._pubsub, None
        try:
            await pubsub.unsubscribe(self._channel)
        finally:
            await pubsub.aclose()

    @staticmethod
    async def _iterate(pubsub: PubSub) -> AsyncIterator[MessageDelivery]:
        async for item in pubsub.listen():
            if item.get("type") != "message":
                continue
            try:
                yield MessageDelivery.from_dict(json.loads(item["data"]))
            except (ValueError, KeyError, TypeError):
                logger.warning("Discarding malformed delivery on %s", item.get("channel"))


class RedisBroadcaster(MessageBroadcaster):
    def __init__(self, redis: Redis, channel_prefix: str = Config.FANOUT_CHANNEL_PREFIX):
        self._redis = redis
        self._channel_prefix = channel_prefix

    def channel_for(self, conversation_id: int) -> str:
        return f"{self._channel_prefix}:{conversation_id}"

    async def publish(self, delivery: MessageDelivery) -> None:
        receivers = await self._redis.publish(
            self.channel_for(delivery.conversation_id), json.dumps(delivery.to_dict())
        )
        if receivers:
            increment_fanout_delivered(receivers)

    def subscribe(self, conversation_id: int) -> Subscription:
        return _PubSubSubscription(self._redis, self.channel_for(conversation_id))
