"""In-memory gallery repository for testing."""

from typing import Optional

from folio.domain.error import ConflictError
from folio.domain.model import Gallery
from folio.domain.repository import GalleryRepository
from folio.domain.value import UserId

from .store import InMemoryStore


class InMemoryGalleryRepository(GalleryRepository):
    """In-memory implementation of GalleryRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_slug(
        self, user_id: UserId, slug: str
    ) -> Optional[Gallery]:
        """Find a user's gallery by slug."""
        return next(
            (
                g
                for g in self._store.galleries.values()
                if g.user_id == user_id and g.slug == slug
            ),
            None,
        )

    async def create(self, gallery: Gallery) -> Gallery:
        """Insert a gallery."""
        if await self.find_by_user_and_slug(gallery.user_id, gallery.slug):
            raise ConflictError("Gallery slug already exists")
        self._store.galleries[gallery.id] = gallery
        return gallery
