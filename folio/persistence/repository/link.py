"""PostgreSQL implementation of Link repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Link
from folio.domain.repository import LinkRepository
from folio.domain.value import LinkId, PortfolioId
from folio.persistence.mappers import link_to_dict, row_to_link
from folio.persistence.tables import links_table


class PostgresLinkRepository(LinkRepository):
    """PostgreSQL implementation of LinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, link_id: LinkId) -> Optional[Link]:
        """Find a link by ID."""
        stmt = select(links_table).where(links_table.c.id == link_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_link(dict(row)) if row else None

    async def find_by_portfolio(
        self, portfolio_id: PortfolioId, public_only: bool = False
    ) -> list[Link]:
        """List links ordered by position, then creation time."""
        stmt = select(links_table).where(links_table.c.portfolio_id == portfolio_id)
        if public_only:
            stmt = stmt.where(links_table.c.is_public.is_(True))
        stmt = stmt.order_by(
            links_table.c.position.asc(), links_table.c.created_at.asc()
        )
        result = await self.session.execute(stmt)
        return [row_to_link(dict(row)) for row in result.mappings().all()]

    async def save(self, link: Link) -> Link:
        """Save a link (create or update)."""
        link_dict = link_to_dict(link)

        existing = await self.find_by_id(link.id)
        if existing:
            stmt = update(links_table).where(links_table.c.id == link.id).values(**link_dict)
        else:
            stmt = insert(links_table).values(**link_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return link

    async def delete(self, link_id: LinkId) -> bool:
        """Delete a link."""
        stmt = delete(links_table).where(links_table.c.id == link_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
