"""Exception handlers translating layered errors into JSON responses.

Every error body has the shape ``{"error": "<message>"}``; field-level
validation failures add ``"field"``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from folio.adapter.error import ProviderError
from folio.domain.error import (
    INVITATION_GENERIC_MESSAGE,
    ConflictError,
    ForbiddenError,
    InvitationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from folio.interface.error import UnauthorizedError
from folio.util.error import ConfigurationError


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    """Build an error response body."""
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    if exc.field:
        return error_response(status.HTTP_400_BAD_REQUEST, exc.message, field=exc.field)
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_invitation_error(request: Request, exc: InvitationError) -> JSONResponse:
    # The specific reason is logged, never returned
    logfire.info(
        "Invitation token rejected", reason=type(exc).__name__, path=request.url.path
    )
    return error_response(status.HTTP_400_BAD_REQUEST, INVITATION_GENERIC_MESSAGE)


async def handle_unauthorized(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


async def handle_forbidden(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, str(exc) or "Forbidden")


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return error_response(status.HTTP_409_CONFLICT, str(exc) or "Conflict")


async def handle_provider_error(request: Request, exc: ProviderError) -> JSONResponse:
    logfire.error("Identity provider failure", error=str(exc), path=request.url.path)
    return error_response(status.HTTP_502_BAD_GATEWAY, "Identity provider unavailable")


async def handle_configuration_error(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    logfire.error(
        "Configuration error",
        error=str(exc),
        env_vars=list(exc.env_vars),
        path=request.url.path,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for every error the lower layers raise.

    Starlette picks the handler of the nearest class in the exception's MRO,
    so an unknown invitation token is handled as an invitation error.
    """
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(InvitationError, handle_invitation_error)
    app.add_exception_handler(UnauthorizedError, handle_unauthorized)
    app.add_exception_handler(ForbiddenError, handle_forbidden)
    app.add_exception_handler(NotAuthorizedError, handle_forbidden)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(ProviderError, handle_provider_error)
    app.add_exception_handler(ConfigurationError, handle_configuration_error)
