"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from folio.domain.value.common import StringValue, ValueObject
from folio.domain.value.identifiers import UserId


class InvitationStatus(str, Enum):
    """Status of an invitation.

    PENDING is the only state that can still be consumed. The other three
    are terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    REVOKED = "revoked"


class UserRole(str, Enum):
    """Local role of a user."""

    USER = "USER"
    ADMIN = "ADMIN"


class UserStatus(str, Enum):
    """Lifecycle state of a local user.

    DELETED is terminal: the row is kept for history with its email cleared.
    """

    ACTIVE = "ACTIVE"
    DEACTIVATED = "DEACTIVATED"
    DELETED = "DELETED"


class InvitationToken(StringValue):
    """Opaque invitation token: 32 random bytes rendered as 64 hex chars."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is 64 lowercase hex characters."""
        if not re.fullmatch(r"[0-9a-f]{64}", v):
            raise ValueError("Token must be 64 hexadecimal characters")
        return v

    @property
    def preview(self) -> str:
        """Truncated form safe to put in logs."""
        return self.root[:8]


class PortfolioSlug(StringValue):
    """URL-safe portfolio slug, the first path segment of a public page.

    Lowercase alphanumerics and hyphens, 3-100 characters.
    Reserved words are checked by SlugService, not here.
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.fullmatch(r"[a-z0-9-]+", v):
            raise ValueError(
                "Slug can only contain lowercase letters, numbers, and hyphens"
            )
        if len(v) < 3 or len(v) > 100:
            raise ValueError("Slug must be 3-100 characters")
        return v


class RemoteUser(ValueObject):
    """An account as seen by the hosted identity provider.

    Built either from a verified access token or from the provider's admin
    API. Both metadata maps are free-form and may be missing keys.
    """

    id: UserId
    email: str | None = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)
    app_metadata: dict[str, Any] = Field(default_factory=dict)
    email_confirmed_at: datetime | None = None
    banned_until: datetime | None = None
    created_at: datetime | None = None
    last_sign_in_at: datetime | None = None

    @property
    def is_banned(self) -> bool:
        """Whether the provider currently blocks sign-in for this account."""
        if self.banned_until is None:
            return False
        now = datetime.now(self.banned_until.tzinfo)
        return self.banned_until > now
