"""User search for starting conversations."""

from fastapi import APIRouter, Depends, Query
from dishka.integrations.fastapi import FromDishka, inject

from chatcore.application.dto import UserDTO
from chatcore.application.queries.users import SearchUsersHandler, SearchUsersQuery
from chatcore.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/api/conversations", tags=["users"])


@router.get("/search/users", response_model=list[UserDTO])
@inject
async def search_users(
    handler: FromDishka[SearchUsersHandler],
    query: str = Query(default=""),
    current_user: AuthUser = Depends(get_current_user),
):
    users = await handler.execute(SearchUsersQuery(query=query))
    return [UserDTO.from_entity(user) for user in users]
