"""Studio routes: the artist's own portfolio, prices and links."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response, status

from folio.application.usecase.auth import AuthenticateUseCase
from folio.application.usecase.signup import (
    CheckSlugRequest,
    CheckSlugResponse,
    CheckSlugUseCase,
)
from folio.application.usecase.studio import (
    CreateLinkRequest,
    CreateLinkUseCase,
    CreatePriceRequest,
    CreatePriceUseCase,
    DeleteLinkUseCase,
    DeletePriceUseCase,
    GetStudioPortfolioResponse,
    GetStudioPortfolioUseCase,
    LinkListResponse,
    LinkView,
    ListLinksUseCase,
    ListPricesUseCase,
    PriceListResponse,
    PriceView,
    UpdateLinkRequest,
    UpdateLinkUseCase,
    UpdatePortfolioRequest,
    UpdatePortfolioResponse,
    UpdatePortfolioUseCase,
    UpdatePriceRequest,
    UpdatePriceUseCase,
)
from folio.config import SupabaseSettings
from folio.interface.api.guards import require_user

router = APIRouter(prefix="/studio", tags=["studio"], route_class=DishkaRoute)


# Portfolio


@router.get("/portfolio", response_model=GetStudioPortfolioResponse)
async def get_portfolio(
    request: Request,
    get_portfolio_use_case: FromDishka[GetStudioPortfolioUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> GetStudioPortfolioResponse:
    """Return the caller's portfolio, creating it on first access."""
    session = await require_user(request, authenticate_use_case, settings)
    return await get_portfolio_use_case.execute(session)


@router.patch("/portfolio", response_model=UpdatePortfolioResponse)
async def update_portfolio(
    body: UpdatePortfolioRequest,
    request: Request,
    update_portfolio_use_case: FromDishka[UpdatePortfolioUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> UpdatePortfolioResponse:
    """Edit the caller's portfolio, including its slug."""
    session = await require_user(request, authenticate_use_case, settings)
    return await update_portfolio_use_case.execute(session, body)


@router.get("/check-slug", response_model=CheckSlugResponse)
async def check_slug(
    request: Request,
    check_slug_use_case: FromDishka[CheckSlugUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
    slug: str = Query(default=""),
) -> CheckSlugResponse:
    """Check a slug for the caller; their own slug is available and current."""
    session = await require_user(request, authenticate_use_case, settings)
    return await check_slug_use_case.execute(
        CheckSlugRequest(slug=slug), user_id=session.user.id
    )


# Prices


@router.get("/prices", response_model=PriceListResponse)
async def list_prices(
    request: Request,
    list_prices_use_case: FromDishka[ListPricesUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> PriceListResponse:
    """List the caller's commission price tiers."""
    session = await require_user(request, authenticate_use_case, settings)
    return await list_prices_use_case.execute(session)


@router.post("/prices", response_model=PriceView, status_code=status.HTTP_201_CREATED)
async def create_price(
    body: CreatePriceRequest,
    request: Request,
    create_price_use_case: FromDishka[CreatePriceUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> PriceView:
    """Add a commission price tier."""
    session = await require_user(request, authenticate_use_case, settings)
    return await create_price_use_case.execute(session, body)


@router.patch("/prices/{price_id}", response_model=PriceView)
async def update_price(
    price_id: str,
    body: UpdatePriceRequest,
    request: Request,
    update_price_use_case: FromDishka[UpdatePriceUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> PriceView:
    """Edit a commission price tier owned by the caller."""
    session = await require_user(request, authenticate_use_case, settings)
    return await update_price_use_case.execute(session, price_id, body)


@router.delete("/prices/{price_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_price(
    price_id: str,
    request: Request,
    delete_price_use_case: FromDishka[DeletePriceUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> Response:
    """Remove a commission price tier owned by the caller."""
    session = await require_user(request, authenticate_use_case, settings)
    await delete_price_use_case.execute(session, price_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Links


@router.get("/links", response_model=LinkListResponse)
async def list_links(
    request: Request,
    list_links_use_case: FromDishka[ListLinksUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> LinkListResponse:
    """List the caller's links."""
    session = await require_user(request, authenticate_use_case, settings)
    return await list_links_use_case.execute(session)


@router.post("/links", response_model=LinkView, status_code=status.HTTP_201_CREATED)
async def create_link(
    body: CreateLinkRequest,
    request: Request,
    create_link_use_case: FromDishka[CreateLinkUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> LinkView:
    """Add a link."""
    session = await require_user(request, authenticate_use_case, settings)
    return await create_link_use_case.execute(session, body)


@router.patch("/links/{link_id}", response_model=LinkView)
async def update_link(
    link_id: str,
    body: UpdateLinkRequest,
    request: Request,
    update_link_use_case: FromDishka[UpdateLinkUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> LinkView:
    """Edit a link owned by the caller."""
    session = await require_user(request, authenticate_use_case, settings)
    return await update_link_use_case.execute(session, link_id, body)


@router.delete("/links/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_link(
    link_id: str,
    request: Request,
    delete_link_use_case: FromDishka[DeleteLinkUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> Response:
    """Remove a link owned by the caller."""
    session = await require_user(request, authenticate_use_case, settings)
    await delete_link_use_case.execute(session, link_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
