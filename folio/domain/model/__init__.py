"""Domain model entities for Folio."""

from folio.domain.model.commission_price import CommissionPrice
from folio.domain.model.gallery import Gallery
from folio.domain.model.invitation import Invitation
from folio.domain.model.link import Link
from folio.domain.model.portfolio import Portfolio
from folio.domain.model.user import User

__all__ = [
    "User",
    "Invitation",
    "Portfolio",
    "Gallery",
    "CommissionPrice",
    "Link",
]
