"""
Conversations API Router - create, read, list and rename conversations.

Static paths (/user, /chats, /contacts, /private, /group) are declared
before /{conversation_id} so they are never captured as an id.

Flow:
  HTTP Request → Router → Command/Query → Handler → Unit of Work → Database
"""

from logging import getLogger
from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from chatcore.application.commands.conversations import (
    CreatePrivateConversationCommand,
    CreatePrivateConversationHandler,
    CreateGroupConversationCommand,
    CreateGroupConversationHandler,
    RenameGroupCommand,
    RenameGroupHandler,
)
from chatcore.application.queries.conversations import (
    ConversationScope,
    GetConversationQuery,
    GetConversationHandler,
    ListConversationsQuery,
    ListConversationsHandler,
)
from chatcore.application.dto import ConversationSummaryDTO
from chatcore.presentation.api.schemas import (
    CreateGroupConversationRequest,
    CreatePrivateConversationRequest,
    RenameConversationRequest,
)
from chatcore.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/api/conversations", tags=["conversations"])


@router.post(
    "/private",
    response_model=ConversationSummaryDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_private_conversation(
    request: CreatePrivateConversationRequest,
    handler: FromDishka[CreatePrivateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Start a private conversation with another user."""
    conversation = await handler.execute(
        CreatePrivateConversationCommand(
            user_id1=current_user.user_id,
            user_id2=request.other_user_id,
            custom_name=request.custom_name,
        )
    )
    return ConversationSummaryDTO.from_entity(conversation)


@router.post(
    "/group",
    response_model=ConversationSummaryDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_group_conversation(
    request: CreateGroupConversationRequest,
    handler: FromDishka[CreateGroupConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a group; the caller becomes its Admin."""
    conversation = await handler.execute(
        CreateGroupConversationCommand(name=request.name, creator_id=current_user.user_id)
    )
    return ConversationSummaryDTO.from_entity(conversation)


async def _list(
    handler: ListConversationsHandler, user_id: int, scope: ConversationScope
) -> list[ConversationSummaryDTO]:
    conversations = await handler.execute(
        ListConversationsQuery(user_id=user_id, scope=scope)
    )
    return [ConversationSummaryDTO.from_entity(c) for c in conversations]


@router.get("/user", response_model=list[ConversationSummaryDTO])
@inject
async def list_user_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """All conversations of the caller."""
    return await _list(handler, current_user.user_id, ConversationScope.USER)


@router.get("/chats", response_model=list[ConversationSummaryDTO])
@inject
async def list_chats(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Conversations with messages, most recent activity first."""
    return await _list(handler, current_user.user_id, ConversationScope.CHATS)


@router.get("/contacts", response_model=list[ConversationSummaryDTO])
@inject
async def list_contacts(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Conversations nobody has written in yet."""
    return await _list(handler, current_user.user_id, ConversationScope.CONTACTS)


@router.get("/{conversation_id}", response_model=ConversationSummaryDTO)
@inject
async def get_conversation(
    conversation_id: int,
    handler: FromDishka[GetConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    conversation = await handler.execute(
        GetConversationQuery(conversation_id=conversation_id, actor_id=current_user.user_id)
    )
    return ConversationSummaryDTO.from_entity(conversation)


@router.put("/{conversation_id}/name", response_model=ConversationSummaryDTO)
@inject
async def rename_conversation(
    conversation_id: int,
    request: RenameConversationRequest,
    handler: FromDishka[RenameGroupHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Rename a group conversation. Request: {"name": "New name"}"""
    conversation = await handler.execute(
        RenameGroupCommand(
            actor_id=current_user.user_id,
            conversation_id=conversation_id,
            new_name=request.name,
        )
    )
    logger.info("Conversation %s renamed by %s", conversation_id, current_user.user_id)
    return ConversationSummaryDTO.from_entity(conversation)
