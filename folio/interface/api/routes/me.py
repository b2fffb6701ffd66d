"""Current user routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from folio.application.usecase.auth import (
    AuthenticateUseCase,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from folio.config import SupabaseSettings
from folio.interface.api.guards import require_user

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> GetCurrentUserResponse:
    """Describe the authenticated user, including role flags."""
    session = await require_user(request, authenticate_use_case, settings)
    return await get_current_user_use_case.execute(session)
