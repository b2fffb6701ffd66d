"""PostgreSQL implementation of Portfolio repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Portfolio
from folio.domain.repository import PortfolioRepository
from folio.domain.value import PortfolioId, PortfolioSlug, UserId
from folio.persistence.mappers import portfolio_to_dict, row_to_portfolio
from folio.persistence.repository.common import execute_guarded
from folio.persistence.tables import portfolios_table


class PostgresPortfolioRepository(PortfolioRepository):
    """PostgreSQL implementation of PortfolioRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *conditions) -> Optional[Portfolio]:
        stmt = select(portfolios_table).where(*conditions)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_portfolio(dict(row)) if row else None

    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[Portfolio]:
        """Find a portfolio by ID."""
        return await self._find_one(portfolios_table.c.id == portfolio_id)

    async def find_by_user_id(self, user_id: UserId) -> Optional[Portfolio]:
        """Find the portfolio owned by a user."""
        return await self._find_one(portfolios_table.c.user_id == user_id)

    async def find_by_slug(self, slug: PortfolioSlug) -> Optional[Portfolio]:
        """Find a portfolio by slug."""
        return await self._find_one(portfolios_table.c.slug == slug.root)

    async def slug_exists(self, slug: str) -> bool:
        """Check if a slug is already taken."""
        stmt = select(portfolios_table.c.id).where(portfolios_table.c.slug == slug)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, portfolio: Portfolio) -> Portfolio:
        """Insert a new portfolio.

        Raises:
            ConflictError: If slug or owner is already taken
        """
        stmt = insert(portfolios_table).values(**portfolio_to_dict(portfolio))
        await execute_guarded(self.session, stmt, "Portfolio slug already exists")
        await self.session.flush()
        return portfolio

    async def save(self, portfolio: Portfolio) -> Portfolio:
        """Update an existing portfolio.

        Raises:
            ConflictError: If the new slug is taken
        """
        values = portfolio_to_dict(portfolio)
        values.pop("id")
        values.pop("created_at")
        stmt = (
            update(portfolios_table)
            .where(portfolios_table.c.id == portfolio.id)
            .values(**values)
        )
        await execute_guarded(self.session, stmt, "Portfolio slug already exists")
        await self.session.flush()
        return portfolio
