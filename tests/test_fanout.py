import asyncio
from datetime import datetime, timezone

import pytest

from chatcore.application.commands.conversations import (
    CreateGroupConversationCommand,
    CreateGroupConversationHandler,
)
from chatcore.application.commands.messages import SendMessageCommand, SendMessageHandler
from chatcore.config.settings import Config
from chatcore.domain.ports.broadcaster import MessageBroadcaster
from chatcore.domain.value_objects import MessageDelivery
from chatcore.infrastructure.memory import InMemoryUnitOfWork
from chatcore.infrastructure.realtime import InMemoryBroadcaster
from chatcore.services.fanout import MessageFanout


def _delivery(message_id, conversation_id=1):
    return MessageDelivery(
        message_id=message_id,
        conversation_id=conversation_id,
        sender_id=1,
        sender_display_name="alice",
        content=f"message {message_id}",
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


class ExplodingBroadcaster(MessageBroadcaster):
    async def publish(self, delivery):
        raise ConnectionError("relay is down")

    def subscribe(self, conversation_id):
        raise NotImplementedError


@pytest.mark.asyncio
async def test_subscribers_receive_deliveries_for_their_conversation():
    broadcaster = InMemoryBroadcaster(queue_size=10)

    async with broadcaster.subscribe(1) as first, broadcaster.subscribe(1) as second:
        async with broadcaster.subscribe(2) as other:
            await broadcaster.publish(_delivery(7, conversation_id=1))

            assert (await asyncio.wait_for(first.__anext__(), 1)).message_id == 7
            assert (await asyncio.wait_for(second.__anext__(), 1)).message_id == 7
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(other.__anext__(), 0.05)

    assert broadcaster.subscriber_count(1) == 0
    assert broadcaster.subscriber_count(2) == 0


@pytest.mark.asyncio
async def test_full_queue_drops_for_slow_subscriber_only():
    broadcaster = InMemoryBroadcaster(queue_size=2)

    async with broadcaster.subscribe(1) as deliveries:
        for message_id in (1, 2, 3):
            await broadcaster.publish(_delivery(message_id))

        received = [
            (await asyncio.wait_for(deliveries.__anext__(), 1)).message_id for _ in range(2)
        ]
        assert received == [1, 2]

        await broadcaster.publish(_delivery(4))
        assert (await asyncio.wait_for(deliveries.__anext__(), 1)).message_id == 4


@pytest.mark.asyncio
async def test_publish_without_subscribers_is_a_noop():
    await InMemoryBroadcaster().publish(_delivery(1))


@pytest.mark.asyncio
async def test_send_publishes_after_commit(store, broadcaster, fanout):
    conversation = await CreateGroupConversationHandler(InMemoryUnitOfWork(store)).execute(
        CreateGroupConversationCommand(name="Team", creator_id=1)
    )
    handler = SendMessageHandler(InMemoryUnitOfWork(store), fanout)

    async with broadcaster.subscribe(conversation.id) as deliveries:
        message = await handler.execute(
            SendMessageCommand(actor_id=1, conversation_id=conversation.id, content="hello")
        )
        delivery = await asyncio.wait_for(deliveries.__anext__(), 1)

    assert delivery.message_id == message.id
    assert delivery.sender_display_name == "alice"
    assert delivery.content == "hello"
    assert delivery.created_at == message.created_at


@pytest.mark.asyncio
async def test_fanout_failure_does_not_fail_the_send(store):
    conversation = await CreateGroupConversationHandler(InMemoryUnitOfWork(store)).execute(
        CreateGroupConversationCommand(name="Team", creator_id=1)
    )
    handler = SendMessageHandler(
        InMemoryUnitOfWork(store), MessageFanout(ExplodingBroadcaster())
    )

    message = await handler.execute(
        SendMessageCommand(actor_id=1, conversation_id=conversation.id, content="still saved")
    )

    assert store.messages[message.id].content == "still saved"


def test_delivery_wire_format_is_camel_case():
    payload = _delivery(5).to_dict()

    assert payload == {
        "messageId": 5,
        "conversationId": 1,
        "senderId": 1,
        "senderDisplayName": "alice",
        "content": "message 5",
        "createdAt": "2024-05-01T12:00:00+00:00",
    }
    assert MessageDelivery.from_dict(payload) == _delivery(5)


def test_default_queue_size_is_read_from_config(monkeypatch):
    monkeypatch.setattr(Config, "FANOUT_QUEUE_SIZE", 3)

    assert InMemoryBroadcaster().queue_size == 3
    assert InMemoryBroadcaster(queue_size=7).queue_size == 7
