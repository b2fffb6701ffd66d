"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from folio.config import AdminSettings, InvitationSettings, SupabaseSettings
from folio.domain.repository import (
    CommissionPriceRepository,
    GalleryRepository,
    InvitationRepository,
    LinkRepository,
    PortfolioRepository,
    UserRepository,
)
from folio.domain.service import (
    CommissionPriceService,
    IdentityService,
    InvitationService,
    LinkService,
    PortfolioService,
    SessionService,
    SlugService,
)
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_slug_service(self) -> SlugService:
        """Provide slug domain service (stateless)."""
        return SlugService()

    @provide(scope=Scope.APP)
    def get_session_service(self, supabase_settings: SupabaseSettings) -> SessionService:
        """Provide session domain service."""
        return SessionService(supabase_settings=supabase_settings)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            ttl=timedelta(days=invitation_settings.ttl_days),
        )

    @provide
    def get_identity_service(
        self, user_repository: UserRepository, admin_settings: AdminSettings
    ) -> IdentityService:
        """Provide identity domain service with the configured superadmin."""
        return IdentityService(
            user_repository=user_repository,
            superadmin_email=admin_settings.superadmin_email,
        )

    @provide
    def get_portfolio_service(
        self,
        portfolio_repository: PortfolioRepository,
        gallery_repository: GalleryRepository,
        slug_service: SlugService,
    ) -> PortfolioService:
        """Provide portfolio domain service."""
        return PortfolioService(
            portfolio_repository=portfolio_repository,
            gallery_repository=gallery_repository,
            slug_service=slug_service,
        )

    @provide
    def get_commission_price_service(
        self, price_repository: CommissionPriceRepository
    ) -> CommissionPriceService:
        """Provide commission price domain service."""
        return CommissionPriceService(price_repository=price_repository)

    @provide
    def get_link_service(self, link_repository: LinkRepository) -> LinkService:
        """Provide link domain service."""
        return LinkService(link_repository=link_repository)
