"""In-memory link repository for testing."""

from typing import Optional

from folio.domain.model import Link
from folio.domain.repository import LinkRepository
from folio.domain.value import LinkId, PortfolioId

from .store import InMemoryStore


class InMemoryLinkRepository(LinkRepository):
    """In-memory implementation of LinkRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, link_id: LinkId) -> Optional[Link]:
        """Find a link by ID."""
        return self._store.links.get(link_id)

    async def find_by_portfolio(
        self, portfolio_id: PortfolioId, public_only: bool = False
    ) -> list[Link]:
        """List links ordered by position, then creation time."""
        links = [
            link
            for link in self._store.links.values()
            if link.portfolio_id == portfolio_id and (link.is_public or not public_only)
        ]
        return sorted(links, key=lambda link: (link.position, link.created_at))

    async def save(self, link: Link) -> Link:
        """Save a link."""
        self._store.links[link.id] = link
        return link

    async def delete(self, link_id: LinkId) -> bool:
        """Delete a link."""
        return self._store.links.pop(link_id, None) is not None
