"""Ensure superadmin use case."""

import logfire
from pydantic import BaseModel

from folio.domain.error import ValidationError
from folio.domain.service import IdentityProviderClient, IdentityService
from folio.domain.service.identity_service import ADMIN_APP_METADATA, ADMIN_USER_METADATA
from folio.domain.service.password_policy import check_password


class EnsureSuperadminResponse(BaseModel):
    """Ensure superadmin response."""

    user_id: str
    email: str
    created: bool


class EnsureSuperadminUseCase:
    """Use case bootstrapping the superadmin account.

    Idempotent. The account for the configured superadmin email is created
    when missing, and the admin markers are written to its metadata every
    time. Nothing else in the system can grant the first admin privilege.
    """

    def __init__(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
    ) -> None:
        self.identity_provider = identity_provider
        self.identity_service = identity_service

    async def execute(self, password: str | None = None) -> EnsureSuperadminResponse:
        """Create or promote the superadmin account.

        Args:
            password: Initial password, only used when the account is missing

        Returns:
            The superadmin account and whether it was created

        Raises:
            ValidationError: If the account is missing and the password is
                absent or too weak
            ProviderError: If the identity provider fails
        """
        email = self.identity_service.superadmin_email
        if not email:
            raise ValidationError("Superadmin email is not configured", field="email")

        with logfire.span("ensure_superadmin.execute", email=email):
            remote = await self.identity_provider.find_user_by_email(email)
            created = remote is None

            if created:
                check_password(password)
                remote = await self.identity_provider.create_user(
                    email=email,
                    password=password,
                    user_metadata=dict(ADMIN_USER_METADATA),
                    app_metadata=dict(ADMIN_APP_METADATA),
                )
            else:
                remote = await self.identity_provider.update_user(
                    remote.id,
                    user_metadata=dict(ADMIN_USER_METADATA),
                    app_metadata=dict(ADMIN_APP_METADATA),
                )

            user = await self.identity_service.ensure_local_user(remote)

            logfire.info(
                "Superadmin ensured",
                user_id=str(user.id),
                created=created,
            )
            return EnsureSuperadminResponse(
                user_id=str(user.id), email=email, created=created
            )
