"""Invitation domain service."""

import math
import secrets
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta

import logfire
from pydantic import ValidationError as PydanticValidationError

from folio.domain.error import (
    AlreadyUsedError,
    ConflictError,
    ExpiredError,
    InvalidInvitationError,
    InvitationNotFoundError,
    NotFoundError,
    ValidationError,
)
from folio.domain.model import Invitation
from folio.domain.model.common import utc_now
from folio.domain.model.invitation import INVITATION_TTL
from folio.domain.repository import InvitationRepository
from folio.domain.value import InvitationId, InvitationStatus, InvitationToken, UserId


@dataclass
class PendingInvitation:
    """A pending invitation with expiry computed for admin display."""

    invitation: Invitation
    is_expired: bool
    days_remaining: int


def generate_token() -> InvitationToken:
    """Generate a fresh 256-bit invitation token."""
    return InvitationToken(secrets.token_hex(32))


def normalize_email(email: str | None) -> str:
    """Normalize an email for storage and comparison."""
    return (email or "").strip().lower()


class InvitationService:
    """Domain service for the invitation ledger.

    State machine: PENDING moves to ACCEPTED (consumed), EXPIRED (lazily, on
    validation past expiry) or REVOKED (admin). The other states are terminal.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        ttl: timedelta = INVITATION_TTL,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            ttl: Fixed validity window applied at creation
        """
        self.invitation_repository = invitation_repository
        self.ttl = ttl

    async def create(
        self,
        email: str | None,
        invited_by: UserId,
        custom_message: str | None = None,
    ) -> tuple[Invitation, bool]:
        """Create an invitation, reusing a live one for the same email.

        Args:
            email: Invitee email, empty or None for a generic invitation
            invited_by: Admin issuing the invitation
            custom_message: Optional note shown to the invitee

        Returns:
            Tuple of (invitation, created). created is False when an existing
            live invitation was returned instead.

        Raises:
            ConflictError: If storage rejects the new token as a duplicate and
                no live invitation for the email took its place
        """
        normalized = normalize_email(email)
        with logfire.span(
            "invitation_service.create", email=normalized, invited_by=str(invited_by)
        ):
            now = utc_now()

            if normalized:
                existing = await self.invitation_repository.find_pending_by_email(
                    normalized
                )
                if existing and not existing.is_past_expiry(now):
                    logfire.info(
                        "Reusing live invitation",
                        invitation_id=str(existing.id),
                        email=normalized,
                    )
                    return existing, False
                if existing:
                    # Frees the one-pending-per-email slot
                    await self.invitation_repository.mark_expired(existing.id)

            invitation = Invitation(
                id=InvitationId(uuid.uuid4()),
                email=normalized,
                token=generate_token(),
                status=InvitationStatus.PENDING,
                invited_by=invited_by,
                custom_message=custom_message or None,
                created_at=now,
                expires_at=now + self.ttl,
            )
            try:
                saved = await self.invitation_repository.save(invitation)
            except ConflictError:
                if not normalized:
                    raise
                # Another request filled the pending slot for this email
                winner = await self.invitation_repository.find_pending_by_email(
                    normalized
                )
                if not winner or winner.is_past_expiry(now):
                    raise
                logfire.info(
                    "Reusing concurrently created invitation",
                    invitation_id=str(winner.id),
                    email=normalized,
                )
                return winner, False

            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                email=normalized or None,
                token=saved.token.preview,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved, True

    async def validate(self, token: str) -> Invitation:
        """Validate a token and return its invitation.

        A PENDING invitation found past its expiry is flipped to EXPIRED as a
        side effect before ExpiredError is raised.

        Args:
            token: Raw token from the invitation link

        Returns:
            The pending, unexpired invitation

        Raises:
            InvitationNotFoundError: No invitation for the token
            AlreadyUsedError: Invitation was already consumed
            InvalidInvitationError: Invitation was revoked or marked expired
            ExpiredError: Invitation just passed its expiry
        """
        with logfire.span("invitation_service.validate", token=token[:8]):
            try:
                parsed = InvitationToken(token)
            except PydanticValidationError:
                logfire.warn("Malformed invitation token", token=token[:8])
                raise InvitationNotFoundError(token[:8])

            invitation = await self.invitation_repository.find_by_token(parsed)
            if not invitation:
                logfire.warn("Invitation not found", token=parsed.preview)
                raise InvitationNotFoundError(parsed.preview)

            if invitation.status == InvitationStatus.ACCEPTED:
                logfire.warn(
                    "Invitation already used", invitation_id=str(invitation.id)
                )
                raise AlreadyUsedError("Invitation has already been used")

            if invitation.status in (
                InvitationStatus.REVOKED,
                InvitationStatus.EXPIRED,
            ):
                logfire.warn(
                    "Invitation no longer valid",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
                raise InvalidInvitationError(
                    f"Invitation is {invitation.status.value}"
                )

            if invitation.is_past_expiry():
                await self.invitation_repository.mark_expired(invitation.id)
                logfire.info(
                    "Invitation expired on validation",
                    invitation_id=str(invitation.id),
                )
                raise ExpiredError("Invitation has expired")

            return invitation

    async def consume(self, token: str, user_id: UserId) -> Invitation:
        """Consume a token for a new user.

        Args:
            token: Raw token from the invitation link
            user_id: User claiming the invitation

        Returns:
            The invitation in its ACCEPTED state

        Raises:
            InvitationError: Any validation failure, or AlreadyUsedError if a
                concurrent request consumed the token first
        """
        with logfire.span(
            "invitation_service.consume", token=token[:8], user_id=str(user_id)
        ):
            invitation = await self.validate(token)

            accepted_at = utc_now()
            claimed = await self.invitation_repository.mark_accepted(
                invitation.token, user_id, accepted_at
            )
            if not claimed:
                logfire.warn(
                    "Invitation consumed concurrently",
                    invitation_id=str(invitation.id),
                )
                raise AlreadyUsedError("Invitation has already been used")

            logfire.info(
                "Invitation consumed",
                invitation_id=str(invitation.id),
                user_id=str(user_id),
            )
            return invitation.model_copy(
                update={
                    "status": InvitationStatus.ACCEPTED,
                    "accepted_at": accepted_at,
                    "accepted_by_user_id": user_id,
                }
            )

    async def list_pending(self, now: datetime | None = None) -> list[PendingInvitation]:
        """List pending invitations with computed expiry, newest first.

        Does not change any state.

        Args:
            now: Reference time, defaults to the current time

        Returns:
            Pending invitations with is_expired and days_remaining
        """
        with logfire.span("invitation_service.list_pending"):
            now = now or utc_now()
            invitations = await self.invitation_repository.find_by_status(
                InvitationStatus.PENDING
            )

            pending = []
            for invitation in invitations:
                remaining = (invitation.expires_at - now).total_seconds()
                pending.append(
                    PendingInvitation(
                        invitation=invitation,
                        is_expired=invitation.is_past_expiry(now),
                        days_remaining=max(0, math.ceil(remaining / 86400)),
                    )
                )
            return pending

    async def get_by_id(self, invitation_id: InvitationId) -> Invitation:
        """Get invitation by ID.

        Raises:
            NotFoundError: If invitation not found
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if not invitation:
            raise NotFoundError("Invitation", str(invitation_id))
        return invitation

    async def revoke(self, invitation_id: InvitationId) -> Invitation:
        """Revoke a pending invitation.

        Args:
            invitation_id: Invitation to revoke

        Returns:
            The revoked invitation

        Raises:
            NotFoundError: If invitation not found
            ValidationError: If the invitation is no longer pending
        """
        with logfire.span(
            "invitation_service.revoke", invitation_id=str(invitation_id)
        ):
            invitation = await self.get_by_id(invitation_id)
            if invitation.status != InvitationStatus.PENDING:
                logfire.warn(
                    "Cannot revoke invitation",
                    invitation_id=str(invitation_id),
                    status=invitation.status.value,
                )
                raise ValidationError(
                    f"Cannot revoke an invitation that is {invitation.status.value}"
                )

            if not await self.invitation_repository.mark_revoked(invitation_id):
                current = await self.get_by_id(invitation_id)
                logfire.warn(
                    "Invitation changed before revoke",
                    invitation_id=str(invitation_id),
                    status=current.status.value,
                )
                raise ValidationError(
                    f"Cannot revoke an invitation that is {current.status.value}"
                )

            logfire.info("Invitation revoked", invitation_id=str(invitation_id))
            return invitation.model_copy(update={"status": InvitationStatus.REVOKED})

    async def resend(
        self, invitation_id: InvitationId, invited_by: UserId
    ) -> Invitation:
        """Issue a fresh invitation replacing an existing one.

        The old invitation is revoked if still pending and kept as history.
        The new one gets a new token and a new validity window.

        Args:
            invitation_id: Invitation to replace
            invited_by: Admin performing the resend

        Returns:
            The newly created invitation

        Raises:
            NotFoundError: If invitation not found
            ValidationError: If the invitation was already accepted
        """
        with logfire.span(
            "invitation_service.resend", invitation_id=str(invitation_id)
        ):
            invitation = await self.get_by_id(invitation_id)
            if invitation.status == InvitationStatus.ACCEPTED:
                raise ValidationError("Invitation has already been accepted")

            if invitation.status == InvitationStatus.PENDING:
                if not await self.invitation_repository.mark_revoked(invitation_id):
                    current = await self.get_by_id(invitation_id)
                    if current.status == InvitationStatus.ACCEPTED:
                        raise ValidationError("Invitation has already been accepted")

            replacement, _ = await self.create(
                invitation.email, invited_by, invitation.custom_message
            )
            logfire.info(
                "Invitation resent",
                previous_id=str(invitation_id),
                invitation_id=str(replacement.id),
            )
            return replacement

    async def cancel(self, invitation_id: InvitationId) -> None:
        """Physically delete an invitation.

        Raises:
            NotFoundError: If invitation not found
        """
        with logfire.span(
            "invitation_service.cancel", invitation_id=str(invitation_id)
        ):
            deleted = await self.invitation_repository.delete(invitation_id)
            if not deleted:
                raise NotFoundError("Invitation", str(invitation_id))
            logfire.info("Invitation cancelled", invitation_id=str(invitation_id))
