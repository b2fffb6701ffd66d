"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from folio.config import Settings
from folio.domain.repository import (
    CommissionPriceRepository,
    GalleryRepository,
    InvitationRepository,
    LinkRepository,
    PortfolioRepository,
    UnitOfWork,
    UserRepository,
)
from folio.persistence.database import create_engine, create_session_factory
from folio.persistence.repository import (
    PostgresCommissionPriceRepository,
    PostgresGalleryRepository,
    PostgresInvitationRepository,
    PostgresLinkRepository,
    PostgresPortfolioRepository,
    PostgresUnitOfWork,
    PostgresUserRepository,
)
from folio.util.di.base import ProviderBase
from folio.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_portfolio_repository(self, session: AsyncSession) -> PortfolioRepository:
        """Provide Portfolio repository."""
        return PostgresPortfolioRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_gallery_repository(self, session: AsyncSession) -> GalleryRepository:
        """Provide Gallery repository."""
        return PostgresGalleryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_commission_price_repository(
        self, session: AsyncSession
    ) -> CommissionPriceRepository:
        """Provide CommissionPrice repository."""
        return PostgresCommissionPriceRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_link_repository(self, session: AsyncSession) -> LinkRepository:
        """Provide Link repository."""
        return PostgresLinkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide savepoint-backed unit of work."""
        return PostgresUnitOfWork(session)
