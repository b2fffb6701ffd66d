"""Get public artist portfolio use case."""

import logfire
from pydantic import BaseModel

from folio.domain.service import CommissionPriceService, LinkService, PortfolioService

from ..studio.common import LinkView, PortfolioView, PriceView


class GetArtistResponse(BaseModel):
    """Public portfolio with its visible links and active prices."""

    portfolio: PortfolioView
    links: list[LinkView]
    prices: list[PriceView]


class GetArtistUseCase:
    """Use case backing the public page at ``/{slug}``."""

    def __init__(
        self,
        portfolio_service: PortfolioService,
        link_service: LinkService,
        price_service: CommissionPriceService,
    ) -> None:
        self.portfolio_service = portfolio_service
        self.link_service = link_service
        self.price_service = price_service

    async def execute(self, slug: str) -> GetArtistResponse:
        """Load a public portfolio.

        Raises:
            NotFoundError: If no portfolio uses the slug
        """
        with logfire.span("get_artist.execute", slug=slug):
            portfolio = await self.portfolio_service.get_by_slug(slug.lower())
            links = await self.link_service.list_for(portfolio, public_only=True)
            prices = await self.price_service.list_for(portfolio, active_only=True)

            return GetArtistResponse(
                portfolio=PortfolioView.from_model(portfolio),
                links=[LinkView.from_model(link) for link in links],
                prices=[PriceView.from_model(price) for price in prices],
            )
