"""Authorization guards shared by routes.

Guards hold no state: they resolve the caller from the request and either
return the session or raise.
"""

from fastapi import Request

from folio.application.usecase.auth import (
    AuthenticatedSession,
    AuthenticateRequest,
    AuthenticateUseCase,
)
from folio.config import SupabaseSettings
from folio.domain.error import ForbiddenError
from folio.interface.error import UnauthorizedError


def extract_token(request: Request, settings: SupabaseSettings) -> str | None:
    """Read the access token from the Authorization header or session cookie."""
    header = request.headers.get("authorization")
    if header:
        scheme, _, credentials = header.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return request.cookies.get(settings.session_cookie) or None


async def get_session(
    request: Request,
    authenticate_use_case: AuthenticateUseCase,
    settings: SupabaseSettings,
) -> AuthenticatedSession | None:
    """Resolve the caller, or None for anonymous requests."""
    token = extract_token(request, settings)
    return await authenticate_use_case.execute(AuthenticateRequest(token=token))


async def require_user(
    request: Request,
    authenticate_use_case: AuthenticateUseCase,
    settings: SupabaseSettings,
) -> AuthenticatedSession:
    """Require an active, authenticated user.

    Raises:
        UnauthorizedError: Without a valid session, or for a deactivated or
            deleted local user
    """
    session = await get_session(request, authenticate_use_case, settings)
    if session is None:
        raise UnauthorizedError()
    if not session.user.is_active:
        raise UnauthorizedError("Account is not active")
    return session


async def require_superadmin(
    request: Request,
    authenticate_use_case: AuthenticateUseCase,
    settings: SupabaseSettings,
) -> AuthenticatedSession:
    """Require the superadmin.

    Raises:
        UnauthorizedError: Without a valid session
        ForbiddenError: When authenticated but not the superadmin
    """
    session = await require_user(request, authenticate_use_case, settings)
    if not session.is_superadmin:
        raise ForbiddenError("Superadmin access required")
    return session
