"""
Realtime Fan-out - push newly persisted messages to live subscribers.

Publishing happens after the sending transaction committed. It is best
effort: a failing broadcaster is logged and counted, never raised, so a
send that reached the store is reported as a success.
"""

import logging

from chatcore.domain.entities.message import Message
from chatcore.domain.ports.broadcaster import MessageBroadcaster, Subscription
from chatcore.domain.value_objects.message_delivery import MessageDelivery
from chatcore.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


class MessageFanout:
    def __init__(self, broadcaster: MessageBroadcaster):
        self._broadcaster = broadcaster

    async def publish(self, message: Message, sender_display_name: str) -> bool:
        """Returns False when the broadcaster failed."""
        delivery = MessageDelivery(
            message_id=message.id,
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            sender_display_name=sender_display_name,
            content=message.content,
            created_at=message.created_at,
        )
        try:
            await self._broadcaster.publish(delivery)
        except Exception:
            increment_error(MetricsErrorType.FANOUT_FAILED)
            logger.exception(
                "Fan-out failed for message %s in conversation %s",
                message.id,
                message.conversation_id,
            )
            return False
        return True

    def subscribe(self, conversation_id: int) -> Subscription:
        return self._broadcaster.subscribe(conversation_id)
