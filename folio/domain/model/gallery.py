"""Gallery entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, utc_now
from folio.domain.value import GalleryId, UserId

COMMISSIONS_GALLERY_SLUG = "commissions"


class Gallery(DomainModel):
    """A named collection of artwork owned by a user.

    Slugs are unique per owner. Every artist gets a hidden ``commissions``
    gallery at signup that holds commission examples.
    """

    id: GalleryId
    user_id: UserId
    slug: str
    name: str
    description: Optional[str] = None
    is_public: bool = True
    created_at: datetime = Field(default_factory=utc_now)
