"""Signup use cases."""

from folio.application.usecase.signup.check_slug import (
    CheckSlugRequest,
    CheckSlugResponse,
    CheckSlugUseCase,
)
from folio.application.usecase.signup.complete_signup import (
    CompleteSignupRequest,
    CompleteSignupResponse,
    CompleteSignupUseCase,
)

__all__ = [
    "CheckSlugRequest",
    "CheckSlugResponse",
    "CheckSlugUseCase",
    "CompleteSignupRequest",
    "CompleteSignupResponse",
    "CompleteSignupUseCase",
]
