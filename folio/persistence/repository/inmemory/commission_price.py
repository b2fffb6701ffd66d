"""In-memory commission price repository for testing."""

from typing import Optional

from folio.domain.model import CommissionPrice
from folio.domain.repository import CommissionPriceRepository
from folio.domain.value import CommissionPriceId, PortfolioId

from .store import InMemoryStore


class InMemoryCommissionPriceRepository(CommissionPriceRepository):
    """In-memory implementation of CommissionPriceRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(
        self, price_id: CommissionPriceId
    ) -> Optional[CommissionPrice]:
        """Find a price tier by ID."""
        return self._store.prices.get(price_id)

    async def find_by_portfolio(
        self, portfolio_id: PortfolioId, active_only: bool = False
    ) -> list[CommissionPrice]:
        """List price tiers ordered by position, then creation time."""
        prices = [
            p
            for p in self._store.prices.values()
            if p.portfolio_id == portfolio_id and (p.active or not active_only)
        ]
        return sorted(prices, key=lambda p: (p.position, p.created_at))

    async def save(self, price: CommissionPrice) -> CommissionPrice:
        """Save a price tier."""
        self._store.prices[price.id] = price
        return price

    async def delete(self, price_id: CommissionPriceId) -> bool:
        """Delete a price tier."""
        return self._store.prices.pop(price_id, None) is not None
