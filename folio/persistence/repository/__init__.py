"""PostgreSQL repository implementations."""

from folio.persistence.repository.commission_price import (
    PostgresCommissionPriceRepository,
)
from folio.persistence.repository.gallery import PostgresGalleryRepository
from folio.persistence.repository.invitation import PostgresInvitationRepository
from folio.persistence.repository.link import PostgresLinkRepository
from folio.persistence.repository.portfolio import PostgresPortfolioRepository
from folio.persistence.repository.unit_of_work import PostgresUnitOfWork
from folio.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommissionPriceRepository",
    "PostgresGalleryRepository",
    "PostgresInvitationRepository",
    "PostgresLinkRepository",
    "PostgresPortfolioRepository",
    "PostgresUnitOfWork",
    "PostgresUserRepository",
]
