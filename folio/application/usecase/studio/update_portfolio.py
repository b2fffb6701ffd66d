"""Update studio portfolio use case."""

import logfire
from pydantic import BaseModel, Field

from folio.domain.service import PortfolioService

from ..auth.authenticate import AuthenticatedSession
from .common import PortfolioView, load_own_portfolio


class UpdatePortfolioRequest(BaseModel):
    """Update portfolio request. Only fields that are sent are changed."""

    slug: str | None = None
    display_name: str | None = Field(default=None, max_length=200)
    description: str | None = None
    accent_color: str | None = None
    color_mode: str | None = None
    logo_url: str | None = None
    hero_image_url: str | None = None
    hero_image_light: str | None = None
    hero_image_dark: str | None = None
    about: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    footer_text: str | None = None


class UpdatePortfolioResponse(BaseModel):
    """Update portfolio response."""

    portfolio: PortfolioView


class UpdatePortfolioUseCase:
    """Use case for editing the caller's portfolio, including its slug."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        self.portfolio_service = portfolio_service

    async def execute(
        self, session: AuthenticatedSession, request: UpdatePortfolioRequest
    ) -> UpdatePortfolioResponse:
        """Apply the edits.

        Raises:
            ForbiddenError: For the superadmin
            ValidationError: If the slug is invalid or taken
        """
        with logfire.span("update_portfolio.execute", user_id=str(session.user.id)):
            portfolio = await load_own_portfolio(session, self.portfolio_service)

            changes = request.model_dump(exclude_unset=True)
            if isinstance(changes.get("slug"), str):
                changes["slug"] = changes["slug"].strip().lower()

            updated = await self.portfolio_service.update(portfolio, changes)
            return UpdatePortfolioResponse(portfolio=PortfolioView.from_model(updated))
