"""Create invitation use case."""

import re
from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field, field_validator

from folio.config import Settings
from folio.domain.error import ValidationError
from folio.domain.service import InvitationService
from folio.domain.value import UserId

from .common import build_invite_link

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class CreateInvitationRequest(BaseModel):
    """Create invitation request.

    Leave email empty to generate a generic link usable by anyone.
    """

    email: str | None = None
    custom_message: str | None = Field(default=None, max_length=2000)

    @field_validator("email")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat a blank email as a generic invitation."""
        if v is None:
            return None
        return v.strip() or None


class CreateInvitationResponse(BaseModel):
    """Create invitation response."""

    invitation_id: str
    email: str | None
    invite_link: str
    expires_at: datetime
    created: bool  # False when an existing live invitation was returned


class CreateInvitationUseCase:
    """Use case for issuing an invitation link."""

    def __init__(self, invitation_service: InvitationService, settings: Settings) -> None:
        """Initialize create invitation use case.

        Args:
            invitation_service: Invitation domain service
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: CreateInvitationRequest, inviter_id: str
    ) -> CreateInvitationResponse:
        """Create or reuse an invitation.

        Args:
            request: Invitation details
            inviter_id: Admin issuing the invitation

        Returns:
            The link to hand to the invitee

        Raises:
            ValidationError: If the email is malformed
            ConfigurationError: If the base URL is not configured
        """
        with logfire.span("create_invitation.execute", inviter_id=inviter_id):
            if request.email and not EMAIL_PATTERN.match(request.email):
                raise ValidationError("Invalid email address", field="email")

            # Fail before writing when no base URL is configured
            self.settings.resolve_base_url()

            invitation, created = await self.invitation_service.create(
                email=request.email,
                invited_by=UserId(UUID(inviter_id)),
                custom_message=request.custom_message,
            )

            return CreateInvitationResponse(
                invitation_id=str(invitation.id),
                email=invitation.email or None,
                invite_link=build_invite_link(self.settings, invitation.token),
                expires_at=invitation.expires_at,
                created=created,
            )
