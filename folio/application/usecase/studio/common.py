"""View models and helpers shared by studio and public portfolio use cases."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from folio.domain.error import ForbiddenError
from folio.domain.model import CommissionPrice, Link, Portfolio
from folio.domain.service import PortfolioService

from ..auth.authenticate import AuthenticatedSession


class PortfolioView(BaseModel):
    """Portfolio as returned by the API."""

    id: str
    slug: str
    display_name: str
    description: str | None
    accent_color: str
    color_mode: str
    logo_url: str | None
    hero_image_url: str | None
    hero_image_light: str | None
    hero_image_dark: str | None
    about: str | None
    primary_color: str | None
    secondary_color: str | None
    footer_text: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, portfolio: Portfolio) -> "PortfolioView":
        data = portfolio.model_dump(exclude={"user_id"})
        data["id"] = str(portfolio.id)
        return cls(**data)


class PriceView(BaseModel):
    """Commission price tier as returned by the API."""

    id: str
    title: str
    description: str | None
    price: Decimal
    image_url: str | None
    position: int
    active: bool
    created_at: datetime

    @classmethod
    def from_model(cls, price: CommissionPrice) -> "PriceView":
        data = price.model_dump(exclude={"portfolio_id"})
        data["id"] = str(price.id)
        return cls(**data)


class LinkView(BaseModel):
    """Link as returned by the API."""

    id: str
    title: str
    url: str
    image_url: str | None
    position: int
    is_public: bool
    created_at: datetime

    @classmethod
    def from_model(cls, link: Link) -> "LinkView":
        data = link.model_dump(exclude={"portfolio_id"})
        data["id"] = str(link.id)
        return cls(**data)


async def load_own_portfolio(
    session: AuthenticatedSession, portfolio_service: PortfolioService
) -> Portfolio:
    """Return the caller's portfolio, creating it on first access.

    Raises:
        ForbiddenError: For the superadmin, who never owns a portfolio
    """
    if session.is_superadmin:
        raise ForbiddenError("Superadmin accounts do not have a portfolio")
    return await portfolio_service.ensure_for_user(session.user)
