"""JWT access token utilities.

Access tokens are issued by the identity provider (Supabase Auth) and signed
with the project's JWT secret. create_access_token mints compatible tokens
for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from pydantic import BaseModel, Field

from folio.config import SupabaseSettings


class TokenPayload(BaseModel):
    """Claims of an identity provider access token."""

    sub: str
    email: str | None = None
    role: str | None = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)
    app_metadata: dict[str, Any] = Field(default_factory=dict)
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_access_token(
    user_id: str,
    email: str | None,
    settings: SupabaseSettings,
    user_metadata: dict[str, Any] | None = None,
    app_metadata: dict[str, Any] | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create an access token shaped like the identity provider's.

    Args:
        user_id: Account id (``sub`` claim)
        email: Account email
        settings: Identity provider settings holding the signing secret
        user_metadata: User-editable metadata claim
        app_metadata: Server-controlled metadata claim
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)

    payload = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "email": email,
        "user_metadata": user_metadata or {},
        "app_metadata": app_metadata or {},
        "iat": now,
        "exp": now + expires_in,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, settings: SupabaseSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Identity provider settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
