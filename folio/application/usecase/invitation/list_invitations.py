"""List pending invitations use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.config import Settings
from folio.domain.service import InvitationService
from folio.domain.value import InvitationStatus

from .common import build_invite_link


class InvitationItem(BaseModel):
    """Pending invitation as shown to admins."""

    id: str
    email: str | None
    status: InvitationStatus
    custom_message: str | None
    created_at: datetime
    expires_at: datetime
    is_expired: bool
    days_remaining: int
    invite_link: str


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationItem]


class ListInvitationsUseCase:
    """Use case for the admin list of pending invitations.

    Expiry is computed for display only; nothing is written.
    """

    def __init__(self, invitation_service: InvitationService, settings: Settings) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self) -> ListInvitationsResponse:
        """List pending invitations, newest first."""
        pending = await self.invitation_service.list_pending()

        return ListInvitationsResponse(
            invitations=[
                InvitationItem(
                    id=str(item.invitation.id),
                    email=item.invitation.email or None,
                    status=item.invitation.status,
                    custom_message=item.invitation.custom_message,
                    created_at=item.invitation.created_at,
                    expires_at=item.invitation.expires_at,
                    is_expired=item.is_expired,
                    days_remaining=item.days_remaining,
                    invite_link=build_invite_link(self.settings, item.invitation.token),
                )
                for item in pending
            ]
        )
