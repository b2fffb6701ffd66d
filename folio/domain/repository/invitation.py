"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from folio.domain.model.invitation import Invitation
from folio.domain.value import InvitationId, InvitationStatus, InvitationToken, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token.

        Used when an invitee opens their link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_email(self, email: str) -> Invitation | None:
        """Find the PENDING invitation addressed to an email.

        At most one exists per email. It may already be past expiry.

        Args:
            email: Normalized (lowercased) email, never empty

        Returns:
            The pending invitation if any, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: InvitationStatus) -> list[Invitation]:
        """List invitations in a status, newest first.

        Args:
            status: Status filter

        Returns:
            Invitations ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation

        Raises:
            ConflictError: If the token or the pending email is already taken
        """
        pass

    @abstractmethod
    async def mark_accepted(
        self, token: InvitationToken, user_id: UserId, accepted_at: datetime
    ) -> bool:
        """Atomically flip a PENDING invitation to ACCEPTED.

        The update is conditional on the current status so that two
        concurrent consumers cannot both succeed.

        Args:
            token: The invitation token
            user_id: The user claiming the invitation
            accepted_at: Acceptance timestamp

        Returns:
            True if exactly this call performed the transition
        """
        pass

    @abstractmethod
    async def mark_expired(self, invitation_id: InvitationId) -> bool:
        """Flip a PENDING invitation to EXPIRED.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            True if the row was still PENDING and is now EXPIRED
        """
        pass

    @abstractmethod
    async def mark_revoked(self, invitation_id: InvitationId) -> bool:
        """Flip a PENDING invitation to REVOKED.

        Conditional on the current status, so an invitation consumed in the
        meantime stays ACCEPTED.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            True if the row was still PENDING and is now REVOKED
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> bool:
        """Physically delete an invitation.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            True if a row was deleted
        """
        pass
