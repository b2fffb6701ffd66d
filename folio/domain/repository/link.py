"""Link repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.link import Link
from folio.domain.value import LinkId, PortfolioId


class LinkRepository(ABC):
    """Repository for Link entity."""

    @abstractmethod
    async def find_by_id(self, link_id: LinkId) -> Link | None:
        """Find a link by ID."""
        pass

    @abstractmethod
    async def find_by_portfolio(
        self, portfolio_id: PortfolioId, public_only: bool = False
    ) -> list[Link]:
        """List a portfolio's links.

        Args:
            portfolio_id: Owning portfolio
            public_only: Exclude hidden links

        Returns:
            Links ordered by position, then created_at
        """
        pass

    @abstractmethod
    async def save(self, link: Link) -> Link:
        """Save a link (create or update)."""
        pass

    @abstractmethod
    async def delete(self, link_id: LinkId) -> bool:
        """Delete a link.

        Returns:
            True if a row was deleted
        """
        pass
