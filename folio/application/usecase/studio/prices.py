"""Studio commission price use cases."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from folio.domain.error import NotFoundError
from folio.domain.service import CommissionPriceService, PortfolioService
from folio.domain.value import CommissionPriceId

from ..auth.authenticate import AuthenticatedSession
from .common import PriceView, load_own_portfolio


def _parse_price_id(price_id: str) -> CommissionPriceId:
    try:
        return CommissionPriceId(UUID(price_id))
    except ValueError:
        raise NotFoundError("Price", price_id)


class CreatePriceRequest(BaseModel):
    """Create price request."""

    title: str | None = None
    price: Decimal | str | None = None
    description: str | None = None
    image_url: str | None = None
    position: int | None = None
    active: bool = True


class UpdatePriceRequest(BaseModel):
    """Update price request. Only fields that are sent are changed."""

    title: str | None = None
    price: Decimal | str | None = None
    description: str | None = None
    image_url: str | None = None
    position: int | None = None
    active: bool | None = None


class PriceListResponse(BaseModel):
    """Price list response."""

    prices: list[PriceView]


class PriceUseCase:
    """Base for price use cases operating on the caller's portfolio."""

    def __init__(
        self,
        portfolio_service: PortfolioService,
        price_service: CommissionPriceService,
    ) -> None:
        self.portfolio_service = portfolio_service
        self.price_service = price_service


class ListPricesUseCase(PriceUseCase):
    """List every tier of the caller's portfolio, inactive ones included."""

    async def execute(self, session: AuthenticatedSession) -> PriceListResponse:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        prices = await self.price_service.list_for(portfolio)
        return PriceListResponse(prices=[PriceView.from_model(p) for p in prices])


class CreatePriceUseCase(PriceUseCase):
    """Add a tier to the caller's portfolio."""

    async def execute(
        self, session: AuthenticatedSession, request: CreatePriceRequest
    ) -> PriceView:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        price = await self.price_service.create(
            portfolio,
            title=request.title,
            price=request.price,
            description=request.description,
            image_url=request.image_url,
            position=request.position,
            active=request.active,
        )
        return PriceView.from_model(price)


class UpdatePriceUseCase(PriceUseCase):
    """Edit one of the caller's tiers."""

    async def execute(
        self,
        session: AuthenticatedSession,
        price_id: str,
        request: UpdatePriceRequest,
    ) -> PriceView:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        price = await self.price_service.update(
            portfolio,
            _parse_price_id(price_id),
            request.model_dump(exclude_unset=True),
        )
        return PriceView.from_model(price)


class DeletePriceUseCase(PriceUseCase):
    """Remove one of the caller's tiers."""

    async def execute(self, session: AuthenticatedSession, price_id: str) -> None:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        await self.price_service.delete(portfolio, _parse_price_id(price_id))
