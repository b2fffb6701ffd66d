"""Session domain service."""

from uuid import UUID

import logfire

from folio.config import SupabaseSettings
from folio.domain.value import RemoteUser, UserId
from folio.util.jwt import JWTError, verify_access_token


class SessionService:
    """Domain service turning access tokens into remote accounts."""

    def __init__(self, supabase_settings: SupabaseSettings) -> None:
        """Initialize session service.

        Args:
            supabase_settings: Identity provider settings
        """
        self.supabase_settings = supabase_settings

    def verify(self, token: str) -> RemoteUser:
        """Verify an access token and build the remote account from its claims.

        Args:
            token: JWT access token

        Returns:
            Remote account described by the token

        Raises:
            JWTError: If token is invalid, expired or has a malformed subject
        """
        with logfire.span("session_service.verify"):
            payload = verify_access_token(token, self.supabase_settings)
            try:
                user_id = UserId(UUID(payload.sub))
            except ValueError:
                logfire.warn("Access token subject is not a UUID")
                raise JWTError("Invalid token")

            return RemoteUser(
                id=user_id,
                email=payload.email,
                user_metadata=payload.user_metadata,
                app_metadata=payload.app_metadata,
            )

    def user_from_token(self, token: str | None) -> RemoteUser | None:
        """Resolve a token without raising.

        Args:
            token: JWT access token (optional)

        Returns:
            Remote account if token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify(token)
        except JWTError as e:
            logfire.debug(
                "Token verification failed, treating as unauthenticated", error=str(e)
            )
            return None
