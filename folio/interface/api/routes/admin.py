"""Admin user management routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status

from folio.application.usecase.admin import (
    DeleteUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserResponse,
    UpdateUserUseCase,
)
from folio.application.usecase.auth import AuthenticateUseCase
from folio.config import SupabaseSettings
from folio.interface.api.guards import require_superadmin

router = APIRouter(prefix="/admin/users", tags=["admin"], route_class=DishkaRoute)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    request: Request,
    list_users_use_case: FromDishka[ListUsersUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> ListUsersResponse:
    """List every account with its local status (superadmin only)."""
    await require_superadmin(request, authenticate_use_case, settings)
    return await list_users_use_case.execute()


@router.patch("/{user_id}", response_model=UpdateUserResponse)
async def update_user(
    user_id: str,
    body: UpdateUserRequest,
    request: Request,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> UpdateUserResponse:
    """Deactivate, activate or change the role of a user (superadmin only)."""
    session = await require_superadmin(request, authenticate_use_case, settings)
    return await update_user_use_case.execute(
        user_id, body, actor_id=str(session.user.id)
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    request: Request,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> Response:
    """Delete a user (superadmin only, never oneself)."""
    session = await require_superadmin(request, authenticate_use_case, settings)
    await delete_user_use_case.execute(user_id, actor_id=str(session.user.id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
