"""Repository interfaces for Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from folio.domain.repository.commission_price import CommissionPriceRepository
from folio.domain.repository.gallery import GalleryRepository
from folio.domain.repository.invitation import InvitationRepository
from folio.domain.repository.link import LinkRepository
from folio.domain.repository.portfolio import PortfolioRepository
from folio.domain.repository.unit_of_work import UnitOfWork
from folio.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "InvitationRepository",
    "PortfolioRepository",
    "GalleryRepository",
    "CommissionPriceRepository",
    "LinkRepository",
    "UnitOfWork",
]
