"""Shared state for in-memory repositories."""

from dataclasses import dataclass, field

from folio.domain.model import (
    CommissionPrice,
    Gallery,
    Invitation,
    Link,
    Portfolio,
    User,
)
from folio.domain.value import (
    CommissionPriceId,
    GalleryId,
    InvitationId,
    LinkId,
    PortfolioId,
    UserId,
)


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    One store lives as long as its container, so repositories created for
    different requests of the same test see the same data.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    invitations: dict[InvitationId, Invitation] = field(default_factory=dict)
    portfolios: dict[PortfolioId, Portfolio] = field(default_factory=dict)
    galleries: dict[GalleryId, Gallery] = field(default_factory=dict)
    prices: dict[CommissionPriceId, CommissionPrice] = field(default_factory=dict)
    links: dict[LinkId, Link] = field(default_factory=dict)

    def snapshot(self) -> dict[str, dict]:
        """Copy every table. Models are immutable, so shallow copies suffice."""
        return {name: dict(table) for name, table in vars(self).items()}

    def restore(self, snapshot: dict[str, dict]) -> None:
        """Put every table back to a snapshot, in place."""
        for name, rows in snapshot.items():
            table = getattr(self, name)
            table.clear()
            table.update(rows)
