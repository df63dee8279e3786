"""
Realtime WebSocket endpoint.

    WS /ws/conversations/{conversation_id}?token=<JWT>

Server → client frames:
    {"type": "message", "messageId": ..., "conversationId": ..., "senderId": ...,
     "senderDisplayName": ..., "content": ..., "createdAt": ...}
    {"type": "error", "error": "..."}

Client → server frames:
    {"content": "hello", "senderId": 3}   (senderId optional, must be the caller)

Inbound frames go through SendMessageHandler exactly like the HTTP route,
each in its own DI request scope and transaction.
"""

import asyncio
import logging
from typing import Any, AsyncIterator

import jwt
from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from chatcore.application.commands.messages import SendMessageCommand, SendMessageHandler
from chatcore.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
)
from chatcore.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatcore.domain.value_objects.message_delivery import MessageDelivery
from chatcore.observability.metrics import (
    decrement_active_subscribers,
    increment_active_subscribers,
)
from chatcore.presentation.dependencies.auth import AuthUser, decode_user_token
from chatcore.services.fanout import MessageFanout

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])

_HANDLED_ERRORS = (
    EntityNotFoundError,
    AccessDeniedError,
    ConflictError,
    DomainValidationError,
)


async def _error(websocket: WebSocket, message: str) -> None:
    await websocket.send_json({"type": "error", "error": message})


async def _is_participant(
    container: AsyncContainer, conversation_id: int, user_id: int
) -> bool:
    async with container() as request_container:
        handler = await request_container.get(GetConversationHandler)
        try:
            await handler.execute(
                GetConversationQuery(conversation_id=conversation_id, actor_id=user_id)
            )
        except EntityNotFoundError:
            return False
    return True


async def _forward_deliveries(
    websocket: WebSocket,
    container: AsyncContainer,
    deliveries: AsyncIterator[MessageDelivery],
    conversation_id: int,
    user: AuthUser,
) -> None:
    async for delivery in deliveries:
        # Membership can be revoked while the socket is open
        if not await _is_participant(container, conversation_id, user.user_id):
            logger.info(
                "User %s is no longer in conversation %s, closing socket",
                user.user_id,
                conversation_id,
            )
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return
        try:
            await websocket.send_json({"type": "message", **delivery.to_dict()})
        except WebSocketDisconnect:
            return


async def _handle_frame(
    websocket: WebSocket,
    container: AsyncContainer,
    conversation_id: int,
    user: AuthUser,
    frame: Any,
) -> None:
    if not isinstance(frame, dict) or not isinstance(frame.get("content"), str):
        await _error(websocket, "Frame must be an object with a string 'content'")
        return

    sender_id = frame.get("senderId")
    if sender_id is not None:
        if isinstance(sender_id, bool) or not isinstance(sender_id, int):
            await _error(websocket, "senderId must be an integer")
            return
        if sender_id != user.user_id:
            logger.warning(
                "User %s tried to send as %s in conversation %s",
                user.user_id,
                sender_id,
                conversation_id,
            )
            await _error(websocket, "Cannot send messages as another user")
            return

    async with container() as request_container:
        handler = await request_container.get(SendMessageHandler)
        try:
            await handler.execute(
                SendMessageCommand(
                    actor_id=user.user_id,
                    conversation_id=conversation_id,
                    content=frame["content"],
                )
            )
        except _HANDLED_ERRORS as e:
            await _error(websocket, str(e))
        except Exception:
            logger.exception(
                "Failed to handle frame from user %s in conversation %s",
                user.user_id,
                conversation_id,
            )
            await _error(websocket, "Internal server error")


async def _receive_frames(
    websocket: WebSocket,
    container: AsyncContainer,
    conversation_id: int,
    user: AuthUser,
) -> None:
    while True:
        try:
            frame = await websocket.receive_json()
        except WebSocketDisconnect:
            return
        except ValueError:
            await _error(websocket, "Frame is not valid JSON")
            continue
        await _handle_frame(websocket, container, conversation_id, user, frame)


@router.websocket("/ws/conversations/{conversation_id}")
async def conversation_socket(websocket: WebSocket, conversation_id: int, token: str = ""):
    try:
        user = decode_user_token(token)
    except (jwt.InvalidTokenError, ValueError):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    container: AsyncContainer = websocket.app.state.dishka_container
    if not await _is_participant(container, conversation_id, user.user_id):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    fanout = await container.get(MessageFanout)
    # Subscribe before accepting so nothing sent after the handshake is missed
    async with fanout.subscribe(conversation_id) as deliveries:
        await websocket.accept()
        increment_active_subscribers()
        logger.info("User %s subscribed to conversation %s", user.user_id, conversation_id)
        forwarder = asyncio.create_task(
            _forward_deliveries(websocket, container, deliveries, conversation_id, user)
        )
        receiver = asyncio.create_task(
            _receive_frames(websocket, container, conversation_id, user)
        )
        try:
            # Whichever side finishes first ends the session
            done, _ = await asyncio.wait(
                {forwarder, receiver}, return_when=asyncio.FIRST_COMPLETED
            )
            for task in done:
                task.result()
        finally:
            for task in (forwarder, receiver):
                task.cancel()
            await asyncio.gather(forwarder, receiver, return_exceptions=True)
            decrement_active_subscribers()
            logger.info(
                "User %s unsubscribed from conversation %s", user.user_id, conversation_id
            )
