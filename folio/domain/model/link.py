"""Link entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, utc_now
from folio.domain.value import LinkId, PortfolioId


class Link(DomainModel):
    """An outbound link listed on the artist's links page."""

    id: LinkId
    portfolio_id: PortfolioId
    title: str = Field(min_length=1, max_length=200)
    url: str = Field(min_length=1)
    image_url: Optional[str] = None
    position: int = 0
    is_public: bool = True
    created_at: datetime = Field(default_factory=utc_now)
