"""Invitation entity.

Invitations gate artist registration. An admin issues a link carrying a
single-use token; the token is consumed when the invitee completes signup.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, utc_now
from folio.domain.value import InvitationId, InvitationStatus, InvitationToken, UserId

INVITATION_TTL = timedelta(days=7)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - expires_at is fixed at creation and never extended
    - Only a PENDING, unexpired invitation may be consumed, and only once
    - ACCEPTED, EXPIRED and REVOKED are terminal
    - An empty email marks a generic invite usable by any address
    """

    id: InvitationId
    email: str = ""
    token: InvitationToken
    status: InvitationStatus = InvitationStatus.PENDING
    invited_by: UserId
    custom_message: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None

    def is_past_expiry(self, now: datetime | None = None) -> bool:
        """Whether the fixed validity window has passed."""
        return (now or utc_now()) >= self.expires_at

    def is_live(self, now: datetime | None = None) -> bool:
        """Whether this invitation can still be consumed."""
        return self.status == InvitationStatus.PENDING and not self.is_past_expiry(
            now
        )
