"""Get studio portfolio use case."""

from pydantic import BaseModel

from folio.domain.service import PortfolioService

from ..auth.authenticate import AuthenticatedSession
from .common import PortfolioView, load_own_portfolio


class GetStudioPortfolioResponse(BaseModel):
    """Get studio portfolio response."""

    portfolio: PortfolioView


class GetStudioPortfolioUseCase:
    """Use case returning the caller's own portfolio.

    A missing portfolio is created with a slug derived from the email.
    """

    def __init__(self, portfolio_service: PortfolioService) -> None:
        self.portfolio_service = portfolio_service

    async def execute(self, session: AuthenticatedSession) -> GetStudioPortfolioResponse:
        portfolio = await load_own_portfolio(session, self.portfolio_service)
        return GetStudioPortfolioResponse(portfolio=PortfolioView.from_model(portfolio))
