"""
Participants API Router - membership, roles and block state.

The block/unblock routes carry the conversation id in the body and are
declared before the /{conversation_id}/... routes.
"""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from chatcore.application.commands.participants import (
    AddParticipantCommand,
    AddParticipantHandler,
    BlockParticipantCommand,
    BlockParticipantHandler,
    PromoteParticipantCommand,
    PromoteParticipantHandler,
    RemoveParticipantCommand,
    RemoveParticipantHandler,
    UnblockParticipantCommand,
    UnblockParticipantHandler,
)
from chatcore.application.queries.participants import (
    ListParticipantsHandler,
    ListParticipantsQuery,
)
from chatcore.application.dto import ParticipantDTO
from chatcore.presentation.api.schemas import (
    AddParticipantRequest,
    BlockParticipantRequest,
    SuccessResponse,
)
from chatcore.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/api/conversations", tags=["participants"])


@router.patch("/participants/block", response_model=ParticipantDTO)
@inject
async def block_participant(
    request: BlockParticipantRequest,
    handler: FromDishka[BlockParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    participation = await handler.execute(
        BlockParticipantCommand(
            actor_id=current_user.user_id,
            conversation_id=request.conversation_id,
            user_id=request.target_user_id,
        )
    )
    return ParticipantDTO.from_entity(participation)


@router.patch("/participants/unblock", response_model=ParticipantDTO)
@inject
async def unblock_participant(
    request: BlockParticipantRequest,
    handler: FromDishka[UnblockParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    participation = await handler.execute(
        UnblockParticipantCommand(
            actor_id=current_user.user_id,
            conversation_id=request.conversation_id,
            user_id=request.target_user_id,
        )
    )
    return ParticipantDTO.from_entity(participation)


@router.get("/{conversation_id}/participants", response_model=list[ParticipantDTO])
@inject
async def list_participants(
    conversation_id: int,
    handler: FromDishka[ListParticipantsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    participants = await handler.execute(
        ListParticipantsQuery(conversation_id=conversation_id, actor_id=current_user.user_id)
    )
    return [ParticipantDTO.from_entity(p) for p in participants]


@router.post(
    "/{conversation_id}/participants",
    response_model=ParticipantDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_participant(
    conversation_id: int,
    request: AddParticipantRequest,
    handler: FromDishka[AddParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Admins only. Request: {"userId": 7, "role": "Admin" | null}"""
    participation = await handler.execute(
        AddParticipantCommand(
            actor_id=current_user.user_id,
            conversation_id=conversation_id,
            user_id=request.user_id,
            role=request.role,
        )
    )
    return ParticipantDTO.from_entity(participation)


@router.delete("/{conversation_id}/participants/{user_id}", response_model=SuccessResponse)
@inject
async def remove_participant(
    conversation_id: int,
    user_id: int,
    handler: FromDishka[RemoveParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Leave (user_id is the caller) or remove someone else (Admins only)."""
    removed = await handler.execute(
        RemoveParticipantCommand(
            actor_id=current_user.user_id,
            conversation_id=conversation_id,
            target_user_id=user_id,
        )
    )
    return SuccessResponse(success=removed)


@router.post(
    "/{conversation_id}/participants/{user_id}/promote",
    response_model=ParticipantDTO,
)
@inject
async def promote_participant(
    conversation_id: int,
    user_id: int,
    handler: FromDishka[PromoteParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    participation = await handler.execute(
        PromoteParticipantCommand(
            actor_id=current_user.user_id,
            conversation_id=conversation_id,
            target_user_id=user_id,
        )
    )
    return ParticipantDTO.from_entity(participation)
