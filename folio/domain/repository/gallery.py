"""Gallery repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.gallery import Gallery
from folio.domain.value import UserId


class GalleryRepository(ABC):
    """Repository for Gallery entity."""

    @abstractmethod
    async def find_by_user_and_slug(self, user_id: UserId, slug: str) -> Gallery | None:
        """Find a user's gallery by slug."""
        pass

    @abstractmethod
    async def create(self, gallery: Gallery) -> Gallery:
        """Insert a new gallery.

        Raises:
            ConflictError: If the owner already has a gallery with this slug
        """
        pass
