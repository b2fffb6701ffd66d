"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.admin import (
    DeleteUserUseCase,
    EnsureSuperadminUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from folio.application.usecase.artist import GetArtistUseCase
from folio.application.usecase.auth import AuthenticateUseCase, GetCurrentUserUseCase
from folio.application.usecase.invitation import (
    CancelInvitationUseCase,
    CreateInvitationUseCase,
    ListInvitationsUseCase,
    ResendInvitationUseCase,
    RevokeInvitationUseCase,
    ValidateInvitationUseCase,
)
from folio.application.usecase.signup import CheckSlugUseCase, CompleteSignupUseCase
from folio.application.usecase.studio import (
    CreateLinkUseCase,
    CreatePriceUseCase,
    DeleteLinkUseCase,
    DeletePriceUseCase,
    GetStudioPortfolioUseCase,
    ListLinksUseCase,
    ListPricesUseCase,
    UpdateLinkUseCase,
    UpdatePortfolioUseCase,
    UpdatePriceUseCase,
)
from folio.config import Settings
from folio.domain.repository import UnitOfWork
from folio.domain.service import (
    CommissionPriceService,
    IdentityProviderClient,
    IdentityService,
    InvitationService,
    LinkService,
    PortfolioService,
    SessionService,
    SlugService,
)
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_authenticate_use_case(
        self, session_service: SessionService, identity_service: IdentityService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(
            session_service=session_service, identity_service=identity_service
        )

    @provide
    def get_current_user_use_case(
        self, portfolio_service: PortfolioService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(portfolio_service=portfolio_service)

    # Invitation use cases
    @provide
    def get_create_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService, identity_service: IdentityService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(
            invitation_service=invitation_service, identity_service=identity_service
        )

    @provide
    def get_revoke_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> RevokeInvitationUseCase:
        """Provide revoke invitation use case."""
        return RevokeInvitationUseCase(invitation_service=invitation_service)

    @provide
    def get_resend_invitation_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> ResendInvitationUseCase:
        """Provide resend invitation use case."""
        return ResendInvitationUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide
    def get_cancel_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> CancelInvitationUseCase:
        """Provide cancel invitation use case."""
        return CancelInvitationUseCase(invitation_service=invitation_service)

    # Signup use cases
    @provide
    def get_check_slug_use_case(
        self, portfolio_service: PortfolioService
    ) -> CheckSlugUseCase:
        """Provide check slug use case."""
        return CheckSlugUseCase(portfolio_service=portfolio_service)

    @provide
    def get_complete_signup_use_case(
        self,
        invitation_service: InvitationService,
        identity_service: IdentityService,
        portfolio_service: PortfolioService,
        slug_service: SlugService,
        identity_provider: IdentityProviderClient,
        unit_of_work: UnitOfWork,
    ) -> CompleteSignupUseCase:
        """Provide complete signup use case."""
        return CompleteSignupUseCase(
            invitation_service=invitation_service,
            identity_service=identity_service,
            portfolio_service=portfolio_service,
            slug_service=slug_service,
            identity_provider=identity_provider,
            unit_of_work=unit_of_work,
        )

    # Admin use cases
    @provide
    def get_list_users_use_case(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            identity_provider=identity_provider, identity_service=identity_service
        )

    @provide
    def get_update_user_use_case(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(
            identity_provider=identity_provider, identity_service=identity_service
        )

    @provide
    def get_delete_user_use_case(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
        unit_of_work: UnitOfWork,
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(
            identity_provider=identity_provider,
            identity_service=identity_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_ensure_superadmin_use_case(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
    ) -> EnsureSuperadminUseCase:
        """Provide ensure superadmin use case."""
        return EnsureSuperadminUseCase(
            identity_provider=identity_provider, identity_service=identity_service
        )

    # Studio use cases
    @provide
    def get_studio_portfolio_use_case(
        self, portfolio_service: PortfolioService
    ) -> GetStudioPortfolioUseCase:
        """Provide get studio portfolio use case."""
        return GetStudioPortfolioUseCase(portfolio_service=portfolio_service)

    @provide
    def get_update_portfolio_use_case(
        self, portfolio_service: PortfolioService
    ) -> UpdatePortfolioUseCase:
        """Provide update portfolio use case."""
        return UpdatePortfolioUseCase(portfolio_service=portfolio_service)

    @provide
    def get_list_prices_use_case(
        self, portfolio_service: PortfolioService, price_service: CommissionPriceService
    ) -> ListPricesUseCase:
        """Provide list prices use case."""
        return ListPricesUseCase(portfolio_service, price_service)

    @provide
    def get_create_price_use_case(
        self, portfolio_service: PortfolioService, price_service: CommissionPriceService
    ) -> CreatePriceUseCase:
        """Provide create price use case."""
        return CreatePriceUseCase(portfolio_service, price_service)

    @provide
    def get_update_price_use_case(
        self, portfolio_service: PortfolioService, price_service: CommissionPriceService
    ) -> UpdatePriceUseCase:
        """Provide update price use case."""
        return UpdatePriceUseCase(portfolio_service, price_service)

    @provide
    def get_delete_price_use_case(
        self, portfolio_service: PortfolioService, price_service: CommissionPriceService
    ) -> DeletePriceUseCase:
        """Provide delete price use case."""
        return DeletePriceUseCase(portfolio_service, price_service)

    @provide
    def get_list_links_use_case(
        self, portfolio_service: PortfolioService, link_service: LinkService
    ) -> ListLinksUseCase:
        """Provide list links use case."""
        return ListLinksUseCase(portfolio_service, link_service)

    @provide
    def get_create_link_use_case(
        self, portfolio_service: PortfolioService, link_service: LinkService
    ) -> CreateLinkUseCase:
        """Provide create link use case."""
        return CreateLinkUseCase(portfolio_service, link_service)

    @provide
    def get_update_link_use_case(
        self, portfolio_service: PortfolioService, link_service: LinkService
    ) -> UpdateLinkUseCase:
        """Provide update link use case."""
        return UpdateLinkUseCase(portfolio_service, link_service)

    @provide
    def get_delete_link_use_case(
        self, portfolio_service: PortfolioService, link_service: LinkService
    ) -> DeleteLinkUseCase:
        """Provide delete link use case."""
        return DeleteLinkUseCase(portfolio_service, link_service)

    # Public use cases
    @provide
    def get_artist_use_case(
        self,
        portfolio_service: PortfolioService,
        link_service: LinkService,
        price_service: CommissionPriceService,
    ) -> GetArtistUseCase:
        """Provide get artist use case."""
        return GetArtistUseCase(
            portfolio_service=portfolio_service,
            link_service=link_service,
            price_service=price_service,
        )
