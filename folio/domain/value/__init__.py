"""Domain value objects for Folio."""

from folio.domain.value.identifiers import (
    CommissionPriceId,
    GalleryId,
    InvitationId,
    LinkId,
    PortfolioId,
    UserId,
)
from folio.domain.value.types import (
    InvitationStatus,
    InvitationToken,
    PortfolioSlug,
    RemoteUser,
    UserRole,
    UserStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    "PortfolioId",
    "GalleryId",
    "CommissionPriceId",
    "LinkId",
    # Types
    "InvitationStatus",
    "InvitationToken",
    "PortfolioSlug",
    "RemoteUser",
    "UserRole",
    "UserStatus",
]
