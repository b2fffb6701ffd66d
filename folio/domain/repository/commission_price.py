"""Commission price repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.commission_price import CommissionPrice
from folio.domain.value import CommissionPriceId, PortfolioId


class CommissionPriceRepository(ABC):
    """Repository for CommissionPrice entity."""

    @abstractmethod
    async def find_by_id(self, price_id: CommissionPriceId) -> CommissionPrice | None:
        """Find a price tier by ID."""
        pass

    @abstractmethod
    async def find_by_portfolio(
        self, portfolio_id: PortfolioId, active_only: bool = False
    ) -> list[CommissionPrice]:
        """List a portfolio's price tiers.

        Args:
            portfolio_id: Owning portfolio
            active_only: Exclude inactive tiers

        Returns:
            Tiers ordered by position, then created_at
        """
        pass

    @abstractmethod
    async def save(self, price: CommissionPrice) -> CommissionPrice:
        """Save a price tier (create or update)."""
        pass

    @abstractmethod
    async def delete(self, price_id: CommissionPriceId) -> bool:
        """Delete a price tier.

        Returns:
            True if a row was deleted
        """
        pass
