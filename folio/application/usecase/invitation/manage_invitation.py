"""Admin invitation management use cases: revoke, resend and cancel."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from folio.config import Settings
from folio.domain.error import NotFoundError
from folio.domain.service import InvitationService
from folio.domain.value import InvitationId, InvitationStatus, UserId

from .common import build_invite_link


def _parse_id(invitation_id: str) -> InvitationId:
    try:
        return InvitationId(UUID(invitation_id))
    except ValueError:
        raise NotFoundError("Invitation", invitation_id)


class RevokeInvitationResponse(BaseModel):
    """Revoke invitation response."""

    id: str
    status: InvitationStatus


class RevokeInvitationUseCase:
    """Use case for revoking a pending invitation."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, invitation_id: str) -> RevokeInvitationResponse:
        """Revoke an invitation.

        Raises:
            NotFoundError: If invitation not found
            ValidationError: If the invitation is not pending
        """
        invitation = await self.invitation_service.revoke(_parse_id(invitation_id))
        return RevokeInvitationResponse(id=str(invitation.id), status=invitation.status)


class ResendInvitationResponse(BaseModel):
    """Resend invitation response."""

    invitation_id: str
    previous_invitation_id: str
    invite_link: str
    expires_at: datetime


class ResendInvitationUseCase:
    """Use case for replacing an invitation with a fresh one."""

    def __init__(self, invitation_service: InvitationService, settings: Settings) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, invitation_id: str, inviter_id: str
    ) -> ResendInvitationResponse:
        """Resend an invitation.

        Args:
            invitation_id: Invitation to replace
            inviter_id: Admin performing the resend

        Returns:
            Link of the replacement invitation
        """
        with logfire.span("resend_invitation.execute", invitation_id=invitation_id):
            self.settings.resolve_base_url()
            replacement = await self.invitation_service.resend(
                _parse_id(invitation_id), UserId(UUID(inviter_id))
            )
            return ResendInvitationResponse(
                invitation_id=str(replacement.id),
                previous_invitation_id=invitation_id,
                invite_link=build_invite_link(self.settings, replacement.token),
                expires_at=replacement.expires_at,
            )


class CancelInvitationUseCase:
    """Use case for deleting an invitation outright."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, invitation_id: str) -> None:
        """Delete an invitation.

        Raises:
            NotFoundError: If invitation not found
        """
        await self.invitation_service.cancel(_parse_id(invitation_id))
