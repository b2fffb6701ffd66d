"""In-memory portfolio repository for testing."""

from typing import Optional

from folio.domain.error import ConflictError
from folio.domain.model import Portfolio
from folio.domain.repository import PortfolioRepository
from folio.domain.value import PortfolioId, PortfolioSlug, UserId

from .store import InMemoryStore


class InMemoryPortfolioRepository(PortfolioRepository):
    """In-memory implementation of PortfolioRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _portfolios(self) -> dict[PortfolioId, Portfolio]:
        return self._store.portfolios

    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[Portfolio]:
        """Find a portfolio by ID."""
        return self._portfolios.get(portfolio_id)

    async def find_by_user_id(self, user_id: UserId) -> Optional[Portfolio]:
        """Find the portfolio owned by a user."""
        return next(
            (p for p in self._portfolios.values() if p.user_id == user_id), None
        )

    async def find_by_slug(self, slug: PortfolioSlug) -> Optional[Portfolio]:
        """Find a portfolio by slug."""
        return next((p for p in self._portfolios.values() if p.slug == slug), None)

    async def slug_exists(self, slug: str) -> bool:
        """Check if a slug is already taken."""
        return any(p.slug.root == slug for p in self._portfolios.values())

    def _check_unique(self, portfolio: Portfolio) -> None:
        for other in self._portfolios.values():
            if other.id == portfolio.id:
                continue
            if other.slug == portfolio.slug or other.user_id == portfolio.user_id:
                raise ConflictError("Portfolio slug already exists")

    async def create(self, portfolio: Portfolio) -> Portfolio:
        """Insert a new portfolio.

        Raises:
            ConflictError: If slug or owner is already taken
        """
        self._check_unique(portfolio)
        self._portfolios[portfolio.id] = portfolio
        return portfolio

    async def save(self, portfolio: Portfolio) -> Portfolio:
        """Update a portfolio.

        Raises:
            ConflictError: If the new slug is taken
        """
        self._check_unique(portfolio)
        self._portfolios[portfolio.id] = portfolio
        return portfolio
