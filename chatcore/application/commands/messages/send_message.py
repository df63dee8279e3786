"""
SendMessage Command - persist a text message and fan it out.

Handler:
1. Load conversation (404) and the sender's participation (404)
2. Check the sender may send (BLOCKED participants may not)
3. Validate content, append the message
4. Move the conversation's last_message_at to the message's created_at
5. Commit, then publish to live subscribers

Publishing is outside the transaction: a fan-out failure never undoes
the stored message.
"""

import logging
from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.common.lookups import get_conversation_or_404
from chatcore.domain.entities.message import Message
from chatcore.domain.exceptions import NotAParticipantError
from chatcore.domain.policies.authorization import can_send, require
from chatcore.domain.ports.unit_of_work import UnitOfWork
from chatcore.observability.metrics import increment_messages_sent
from chatcore.services.fanout import MessageFanout
from chatcore.utils.validation import validate_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    actor_id: int
    conversation_id: int
    content: str


class SendMessageHandler(CommandHandler[Message]):
    def __init__(self, uow: UnitOfWork, fanout: MessageFanout):
        self._uow = uow
        self._fanout = fanout

    async def execute(self, command: SendMessageCommand) -> Message:
        async with self._uow:
            conversation = await get_conversation_or_404(
                self._uow, command.conversation_id
            )
            actor = await self._uow.participants.get(
                command.conversation_id, command.actor_id
            )
            if actor is None:
                raise NotAParticipantError(command.actor_id, command.conversation_id)
            require(can_send(actor))

            content = validate_content(command.content)
            message = await self._uow.messages.append(
                Message.text(conversation.id, command.actor_id, content)
            )
            conversation.touch(message.created_at)
            await self._uow.conversations.update_last_message_at(
                conversation.id, conversation.last_message_at
            )
            sender = await self._uow.users.get_by_id(command.actor_id)
            message.sender_name = sender.display_name if sender else None

        increment_messages_sent(conversation.kind.value)
        logger.info(
            "Message %s sent to conversation %s by %s",
            message.id,
            conversation.id,
            command.actor_id,
        )

        await self._fanout.publish(
            message, message.sender_name or str(command.actor_id)
        )
        return message
