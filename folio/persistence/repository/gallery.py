"""PostgreSQL implementation of Gallery repository."""

from typing import Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Gallery
from folio.domain.repository import GalleryRepository
from folio.domain.value import UserId
from folio.persistence.mappers import gallery_to_dict, row_to_gallery
from folio.persistence.repository.common import execute_guarded
from folio.persistence.tables import galleries_table


class PostgresGalleryRepository(GalleryRepository):
    """PostgreSQL implementation of GalleryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_and_slug(
        self, user_id: UserId, slug: str
    ) -> Optional[Gallery]:
        """Find a user's gallery by slug."""
        stmt = select(galleries_table).where(
            and_(galleries_table.c.user_id == user_id, galleries_table.c.slug == slug)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_gallery(dict(row)) if row else None

    async def create(self, gallery: Gallery) -> Gallery:
        """Insert a new gallery."""
        stmt = insert(galleries_table).values(**gallery_to_dict(gallery))
        await execute_guarded(self.session, stmt, "Gallery slug already exists")
        await self.session.flush()
        return gallery
