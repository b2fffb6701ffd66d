"""Mock persistence providers for testing."""

from dishka import Scope, provide

from folio.domain.repository import (
    CommissionPriceRepository,
    GalleryRepository,
    InvitationRepository,
    LinkRepository,
    PortfolioRepository,
    UnitOfWork,
    UserRepository,
)
from folio.persistence.repository.inmemory import (
    InMemoryCommissionPriceRepository,
    InMemoryGalleryRepository,
    InMemoryInvitationRepository,
    InMemoryLinkRepository,
    InMemoryPortfolioRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from folio.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so every request of one container shares data;
    each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, store: InMemoryStore) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_portfolio_repository(self, store: InMemoryStore) -> PortfolioRepository:
        """Provide in-memory portfolio repository."""
        return InMemoryPortfolioRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_gallery_repository(self, store: InMemoryStore) -> GalleryRepository:
        """Provide in-memory gallery repository."""
        return InMemoryGalleryRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_commission_price_repository(
        self, store: InMemoryStore
    ) -> CommissionPriceRepository:
        """Provide in-memory commission price repository."""
        return InMemoryCommissionPriceRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_link_repository(self, store: InMemoryStore) -> LinkRepository:
        """Provide in-memory link repository."""
        return InMemoryLinkRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, store: InMemoryStore) -> UnitOfWork:
        """Provide snapshot-backed unit of work."""
        return InMemoryUnitOfWork(store)
