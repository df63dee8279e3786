"""Messages API Router - send, list and delete messages in a conversation."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from chatcore.application.commands.messages import (
    DeleteMessageAsAdminCommand,
    DeleteMessageAsAdminHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from chatcore.application.queries.messages import ListMessagesHandler, ListMessagesQuery
from chatcore.application.dto import MessageDTO
from chatcore.presentation.api.schemas import SendMessageRequest, SuccessResponse
from chatcore.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/api/conversations", tags=["messages"])


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: int,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Persist a text message and push it to live subscribers."""
    message = await handler.execute(
        SendMessageCommand(
            actor_id=current_user.user_id,
            conversation_id=conversation_id,
            content=request.content,
        )
    )
    return MessageDTO.from_entity(message)


@router.get("/{conversation_id}/messages", response_model=list[MessageDTO])
@inject
async def list_messages(
    conversation_id: int,
    handler: FromDishka[ListMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Conversation history, oldest first."""
    messages = await handler.execute(
        ListMessagesQuery(conversation_id=conversation_id, actor_id=current_user.user_id)
    )
    return [MessageDTO.from_entity(m) for m in messages]


@router.delete(
    "/{conversation_id}/messages/{message_id}", response_model=SuccessResponse
)
@inject
async def delete_message(
    conversation_id: int,
    message_id: int,
    handler: FromDishka[DeleteMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    deleted = await handler.execute(
        DeleteMessageCommand(
            message_id=message_id,
            actor_id=current_user.user_id,
            conversation_id=conversation_id,
        )
    )
    return SuccessResponse(success=deleted)


@router.delete(
    "/{conversation_id}/messages/{message_id}/admin", response_model=SuccessResponse
)
@inject
async def delete_message_as_admin(
    conversation_id: int,
    message_id: int,
    handler: FromDishka[DeleteMessageAsAdminHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    deleted = await handler.execute(
        DeleteMessageAsAdminCommand(
            actor_id=current_user.user_id,
            message_id=message_id,
            conversation_id=conversation_id,
        )
    )
    return SuccessResponse(success=deleted)
