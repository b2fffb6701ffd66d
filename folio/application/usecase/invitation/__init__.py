"""Invitation use cases."""

from folio.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from folio.application.usecase.invitation.list_invitations import (
    InvitationItem,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from folio.application.usecase.invitation.manage_invitation import (
    CancelInvitationUseCase,
    ResendInvitationResponse,
    ResendInvitationUseCase,
    RevokeInvitationResponse,
    RevokeInvitationUseCase,
)
from folio.application.usecase.invitation.validate_invitation import (
    InvitationPreview,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)

__all__ = [
    "CancelInvitationUseCase",
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "InvitationItem",
    "InvitationPreview",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "ResendInvitationResponse",
    "ResendInvitationUseCase",
    "RevokeInvitationResponse",
    "RevokeInvitationUseCase",
    "ValidateInvitationRequest",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
]
