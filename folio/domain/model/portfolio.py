"""Portfolio aggregate root.

Each artist owns exactly one portfolio, published at ``/{slug}``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, utc_now
from folio.domain.value import PortfolioId, PortfolioSlug, UserId


class Portfolio(DomainModel):
    """Portfolio aggregate root.

    Slug and user_id are both unique at the storage layer.
    """

    id: PortfolioId
    slug: PortfolioSlug
    display_name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    user_id: UserId
    accent_color: str = "green"
    color_mode: str = "dark"
    logo_url: Optional[str] = None
    hero_image_url: Optional[str] = None
    hero_image_light: Optional[str] = None
    hero_image_dark: Optional[str] = None
    about: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    footer_text: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
