"""In-memory repository implementations for testing."""

from .commission_price import InMemoryCommissionPriceRepository
from .gallery import InMemoryGalleryRepository
from .invitation import InMemoryInvitationRepository
from .link import InMemoryLinkRepository
from .portfolio import InMemoryPortfolioRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommissionPriceRepository",
    "InMemoryGalleryRepository",
    "InMemoryInvitationRepository",
    "InMemoryLinkRepository",
    "InMemoryPortfolioRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
