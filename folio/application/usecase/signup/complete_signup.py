"""Complete signup use case."""

import logfire
from pydantic import BaseModel

from folio.adapter.error import AccountExistsError, ProviderError
from folio.domain.error import ValidationError
from folio.domain.repository import UnitOfWork
from folio.domain.service import (
    IdentityProviderClient,
    IdentityService,
    InvitationService,
    PortfolioService,
    SlugService,
)
from folio.domain.service.invitation_service import normalize_email
from folio.domain.service.password_policy import check_password
from folio.domain.service.portfolio_service import SLUG_TAKEN_MESSAGE, welcome_description
from folio.domain.value import UserId

ACCOUNT_EXISTS_MESSAGE = "An account with this email already exists"


class CompleteSignupRequest(BaseModel):
    """Complete signup request."""

    token: str
    email: str
    slug: str
    display_name: str
    password: str


class CompleteSignupResponse(BaseModel):
    """Complete signup response."""

    user_id: str
    email: str
    portfolio_id: str
    slug: str


class CompleteSignupUseCase:
    """Use case turning an invitation into an artist account.

    Flow:
    1. Validate the invitation and every input, failing before any write
    2. Create the identity provider account
    3. Create the local user, consume the invitation, create the portfolio
       and the hidden commissions gallery

    Step 3 is one unit of work. If it fails every local write is undone, so
    the invitation is pending again, and the remote account from step 2 is
    deleted.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        identity_service: IdentityService,
        portfolio_service: PortfolioService,
        slug_service: SlugService,
        identity_provider: IdentityProviderClient,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize complete signup use case.

        Args:
            invitation_service: Invitation domain service
            identity_service: Identity domain service
            portfolio_service: Portfolio domain service
            slug_service: Slug domain service
            identity_provider: Identity provider admin client
            unit_of_work: Transaction boundary for the local writes
        """
        self.invitation_service = invitation_service
        self.identity_service = identity_service
        self.portfolio_service = portfolio_service
        self.slug_service = slug_service
        self.identity_provider = identity_provider
        self.unit_of_work = unit_of_work

    async def execute(self, request: CompleteSignupRequest) -> CompleteSignupResponse:
        """Complete a signup.

        Args:
            request: Signup form

        Returns:
            Identifiers of the new account and portfolio

        Raises:
            InvitationError: If the token cannot be used
            ValidationError: If any field is invalid
            ProviderError: If the identity provider fails
        """
        with logfire.span("complete_signup.execute", token=request.token[:8]):
            invitation = await self.invitation_service.validate(request.token)

            email = normalize_email(request.email)
            if not email:
                raise ValidationError("Email is required", field="email")
            if invitation.email and invitation.email != email:
                raise ValidationError(
                    "Email does not match the invitation", field="email"
                )

            display_name = request.display_name.strip()
            if not display_name:
                raise ValidationError("Display name is required", field="display_name")

            slug = self.slug_service.validate_slug(request.slug.strip().lower())
            availability = await self.portfolio_service.check_slug(slug.root)
            if not availability.available:
                raise ValidationError(SLUG_TAKEN_MESSAGE, field="slug")

            check_password(request.password)

            if await self.identity_provider.find_user_by_email(email):
                raise ValidationError(ACCOUNT_EXISTS_MESSAGE, field="email")

            try:
                remote = await self.identity_provider.create_user(
                    email=email,
                    password=request.password,
                    user_metadata={
                        "role": "ARTIST",
                        "full_name": display_name,
                        "display_name": display_name,
                        "portfolio_slug": slug.root,
                    },
                    app_metadata={"roles": ["artist"]},
                )
            except AccountExistsError:
                raise ValidationError(ACCOUNT_EXISTS_MESSAGE, field="email")

            try:
                async with self.unit_of_work.transaction():
                    user = await self.identity_service.ensure_local_user(remote)
                    await self.invitation_service.consume(request.token, user.id)
                    portfolio = await self.portfolio_service.create_for_user(
                        user_id=user.id,
                        display_name=display_name,
                        seed=email,
                        requested_slug=slug.root,
                        description=welcome_description(display_name),
                    )
                    await self.portfolio_service.ensure_commissions_gallery(user.id)
            except Exception as e:
                logfire.warn(
                    "Signup failed after account creation, removing account",
                    user_id=str(remote.id),
                    error=str(e),
                )
                await self._remove_account(remote.id)
                raise

            logfire.info(
                "Signup completed",
                user_id=str(user.id),
                portfolio_id=str(portfolio.id),
                slug=portfolio.slug.root,
            )
            return CompleteSignupResponse(
                user_id=str(user.id),
                email=email,
                portfolio_id=str(portfolio.id),
                slug=portfolio.slug.root,
            )

    async def _remove_account(self, user_id: UserId) -> None:
        try:
            await self.identity_provider.delete_user(user_id)
        except ProviderError as e:
            logfire.error(
                "Could not remove orphaned account", user_id=str(user_id), error=str(e)
            )
