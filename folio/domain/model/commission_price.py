"""Commission price tier entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, utc_now
from folio.domain.value import CommissionPriceId, PortfolioId


class CommissionPrice(DomainModel):
    """A price point shown on the artist's commissions page."""

    id: CommissionPriceId
    portfolio_id: PortfolioId
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    image_url: Optional[str] = None
    position: int = 0
    active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
