"""Signup routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from folio.application.usecase.signup import (
    CheckSlugRequest,
    CheckSlugResponse,
    CheckSlugUseCase,
    CompleteSignupRequest,
    CompleteSignupResponse,
    CompleteSignupUseCase,
)

router = APIRouter(prefix="/signup", tags=["signup"], route_class=DishkaRoute)


@router.get("/check-slug", response_model=CheckSlugResponse)
async def check_slug(
    check_slug_use_case: FromDishka[CheckSlugUseCase],
    slug: str = Query(default=""),
) -> CheckSlugResponse:
    """Check whether a slug can be claimed.

    Malformed or reserved slugs are rejected with 400 and ``field: "slug"``.
    """
    return await check_slug_use_case.execute(CheckSlugRequest(slug=slug))


@router.post(
    "/complete",
    response_model=CompleteSignupResponse,
    status_code=status.HTTP_201_CREATED,
)
async def complete_signup(
    body: CompleteSignupRequest,
    complete_signup_use_case: FromDishka[CompleteSignupUseCase],
) -> CompleteSignupResponse:
    """Redeem an invitation and create the artist account and portfolio."""
    return await complete_signup_use_case.execute(body)
