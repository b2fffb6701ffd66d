"""Validate invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from folio.domain.error import INVITATION_GENERIC_MESSAGE, InvitationError, NotFoundError
from folio.domain.service import IdentityService, InvitationService
from folio.domain.value import InvitationStatus


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    token: str


class InvitationPreview(BaseModel):
    """What an invitee may learn about their invitation."""

    email: str | None
    inviter_name: str | None
    custom_message: str | None
    expires_at: datetime
    status: InvitationStatus


class ValidateInvitationResponse(BaseModel):
    """Validate invitation response."""

    valid: bool
    invitation: InvitationPreview | None = None
    message: str | None = None


class ValidateInvitationUseCase:
    """Use case for checking an invitation link before signup.

    Every failure yields the same message so a caller cannot tell an unknown
    token from a used, revoked or expired one.
    """

    def __init__(
        self, invitation_service: InvitationService, identity_service: IdentityService
    ) -> None:
        """Initialize validate invitation use case.

        Args:
            invitation_service: Invitation domain service
            identity_service: Identity domain service
        """
        self.invitation_service = invitation_service
        self.identity_service = identity_service

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Validate a token.

        Args:
            request: Request with token

        Returns:
            Preview of the invitation, or an invalid result
        """
        with logfire.span("validate_invitation.execute", token=request.token[:8]):
            try:
                invitation = await self.invitation_service.validate(request.token)
            except InvitationError as e:
                logfire.info(
                    "Invitation rejected", reason=type(e).__name__, token=request.token[:8]
                )
                return ValidateInvitationResponse(
                    valid=False, message=INVITATION_GENERIC_MESSAGE
                )

            try:
                inviter = await self.identity_service.get_by_id(invitation.invited_by)
                inviter_name = inviter.name
            except NotFoundError:
                inviter_name = None

            return ValidateInvitationResponse(
                valid=True,
                invitation=InvitationPreview(
                    email=invitation.email or None,
                    inviter_name=inviter_name,
                    custom_message=invitation.custom_message,
                    expires_at=invitation.expires_at,
                    status=invitation.status,
                ),
            )
