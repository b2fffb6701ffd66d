"""Portfolio repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.portfolio import Portfolio
from folio.domain.value import PortfolioId, PortfolioSlug, UserId


class PortfolioRepository(ABC):
    """Repository for Portfolio aggregate."""

    @abstractmethod
    async def find_by_id(self, portfolio_id: PortfolioId) -> Portfolio | None:
        """Find a portfolio by ID."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Portfolio | None:
        """Find the portfolio owned by a user."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: PortfolioSlug) -> Portfolio | None:
        """Find a portfolio by its public slug."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        """Check whether a slug is taken.

        This is only a pre-check; the unique index is authoritative.

        Args:
            slug: Candidate slug (may not be a valid PortfolioSlug)

        Returns:
            True if a portfolio already uses the slug
        """
        pass

    @abstractmethod
    async def create(self, portfolio: Portfolio) -> Portfolio:
        """Insert a new portfolio.

        Args:
            portfolio: The portfolio to insert

        Returns:
            The inserted portfolio

        Raises:
            ConflictError: If the slug or owner already has a portfolio
        """
        pass

    @abstractmethod
    async def save(self, portfolio: Portfolio) -> Portfolio:
        """Update an existing portfolio.

        Raises:
            ConflictError: If a changed slug collides with another portfolio
        """
        pass
