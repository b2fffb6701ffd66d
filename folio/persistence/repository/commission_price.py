"""PostgreSQL implementation of CommissionPrice repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import CommissionPrice
from folio.domain.repository import CommissionPriceRepository
from folio.domain.value import CommissionPriceId, PortfolioId
from folio.persistence.mappers import commission_price_to_dict, row_to_commission_price
from folio.persistence.tables import commission_prices_table


class PostgresCommissionPriceRepository(CommissionPriceRepository):
    """PostgreSQL implementation of CommissionPriceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, price_id: CommissionPriceId
    ) -> Optional[CommissionPrice]:
        """Find a price tier by ID."""
        stmt = select(commission_prices_table).where(
            commission_prices_table.c.id == price_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_commission_price(dict(row)) if row else None

    async def find_by_portfolio(
        self, portfolio_id: PortfolioId, active_only: bool = False
    ) -> list[CommissionPrice]:
        """List price tiers ordered by position, then creation time."""
        stmt = select(commission_prices_table).where(
            commission_prices_table.c.portfolio_id == portfolio_id
        )
        if active_only:
            stmt = stmt.where(commission_prices_table.c.active.is_(True))
        stmt = stmt.order_by(
            commission_prices_table.c.position.asc(),
            commission_prices_table.c.created_at.asc(),
        )
        result = await self.session.execute(stmt)
        return [row_to_commission_price(dict(row)) for row in result.mappings().all()]

    async def save(self, price: CommissionPrice) -> CommissionPrice:
        """Save a price tier (create or update)."""
        price_dict = commission_price_to_dict(price)

        existing = await self.find_by_id(price.id)
        if existing:
            stmt = (
                update(commission_prices_table)
                .where(commission_prices_table.c.id == price.id)
                .values(**price_dict)
            )
        else:
            stmt = insert(commission_prices_table).values(**price_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return price

    async def delete(self, price_id: CommissionPriceId) -> bool:
        """Delete a price tier."""
        stmt = delete(commission_prices_table).where(
            commission_prices_table.c.id == price_id
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
