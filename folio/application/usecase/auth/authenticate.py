"""Authenticate use case."""

import logfire
from pydantic import BaseModel

from folio.domain.model import User
from folio.domain.service import IdentityService, SessionService
from folio.domain.value import RemoteUser


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    token: str | None  # Access token from header or cookie


class AuthenticatedSession(BaseModel):
    """The caller behind a verified access token."""

    remote: RemoteUser
    user: User
    is_admin: bool
    is_superadmin: bool


class AuthenticateUseCase:
    """Use case resolving an access token into a session.

    Every authenticated request passes through here, which keeps the local
    user row in sync with the identity provider.
    """

    def __init__(
        self, session_service: SessionService, identity_service: IdentityService
    ) -> None:
        """Initialize authenticate use case.

        Args:
            session_service: Session domain service
            identity_service: Identity domain service
        """
        self.session_service = session_service
        self.identity_service = identity_service

    async def execute(self, request: AuthenticateRequest) -> AuthenticatedSession | None:
        """Resolve the session.

        Args:
            request: Request with the raw access token

        Returns:
            The session, or None if the token is missing or invalid
        """
        remote = self.session_service.user_from_token(request.token)
        if remote is None:
            return None

        with logfire.span("authenticate.execute", user_id=str(remote.id)):
            user = await self.identity_service.ensure_local_user(remote)
            return AuthenticatedSession(
                remote=remote,
                user=user,
                is_admin=self.identity_service.is_admin(remote),
                is_superadmin=self.identity_service.is_superadmin(remote),
            )
