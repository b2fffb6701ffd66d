"""Strongly typed identifiers for Folio domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# User ids are issued by the identity provider and reused locally
UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
PortfolioId = NewType("PortfolioId", UUID)
GalleryId = NewType("GalleryId", UUID)
CommissionPriceId = NewType("CommissionPriceId", UUID)
LinkId = NewType("LinkId", UUID)
