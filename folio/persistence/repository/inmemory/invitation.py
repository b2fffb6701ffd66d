"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from folio.domain.error import ConflictError
from folio.domain.model import Invitation
from folio.domain.repository import InvitationRepository
from folio.domain.value import InvitationId, InvitationStatus, InvitationToken, UserId

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _invitations(self) -> dict[InvitationId, Invitation]:
        return self._store.invitations

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def find_pending_by_email(self, email: str) -> Optional[Invitation]:
        """Find the pending invitation for an email."""
        for invitation in self._invitations.values():
            if (
                invitation.email == email
                and invitation.status == InvitationStatus.PENDING
            ):
                return invitation
        return None

    async def find_by_status(self, status: InvitationStatus) -> list[Invitation]:
        """List invitations in a status, newest first."""
        matching = [i for i in self._invitations.values() if i.status == status]
        return sorted(matching, key=lambda i: i.created_at, reverse=True)

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Enforces the same uniqueness rules as the database indexes.

        Raises:
            ConflictError: On a duplicate token or pending email
        """
        for other in self._invitations.values():
            if other.id == invitation.id:
                continue
            if other.token == invitation.token:
                raise ConflictError("Invitation token or pending email already exists")
            if (
                invitation.email
                and invitation.status == InvitationStatus.PENDING
                and other.email == invitation.email
                and other.status == InvitationStatus.PENDING
            ):
                raise ConflictError("Invitation token or pending email already exists")

        self._invitations[invitation.id] = invitation
        return invitation

    async def mark_accepted(
        self, token: InvitationToken, user_id: UserId, accepted_at: datetime
    ) -> bool:
        """Flip a PENDING invitation to ACCEPTED if still pending."""
        invitation = await self.find_by_token(token)
        if not invitation or invitation.status != InvitationStatus.PENDING:
            return False

        self._invitations[invitation.id] = invitation.model_copy(
            update={
                "status": InvitationStatus.ACCEPTED,
                "accepted_at": accepted_at,
                "accepted_by_user_id": user_id,
            }
        )
        return True

    async def mark_expired(self, invitation_id: InvitationId) -> bool:
        """Flip a PENDING invitation to EXPIRED if still pending."""
        return self._transition(invitation_id, InvitationStatus.EXPIRED)

    async def mark_revoked(self, invitation_id: InvitationId) -> bool:
        """Flip a PENDING invitation to REVOKED if still pending."""
        return self._transition(invitation_id, InvitationStatus.REVOKED)

    def _transition(self, invitation_id: InvitationId, status: InvitationStatus) -> bool:
        invitation = self._invitations.get(invitation_id)
        if not invitation or invitation.status != InvitationStatus.PENDING:
            return False

        self._invitations[invitation_id] = invitation.model_copy(
            update={"status": status}
        )
        return True

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation."""
        return self._invitations.pop(invitation_id, None) is not None
