"""Authentication use cases."""

from folio.application.usecase.auth.authenticate import (
    AuthenticatedSession,
    AuthenticateRequest,
    AuthenticateUseCase,
)
from folio.application.usecase.auth.get_current_user import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "AuthenticatedSession",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
]
