"""Local user record.

Mirrors an identity-provider account so that local data (portfolios,
prices, links) can reference it and so that status survives remote changes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, utc_now
from folio.domain.value import UserId, UserRole, UserStatus


class User(DomainModel):
    """Local user aggregate root.

    The id is the identity provider's id. Status is owned locally and is
    never overwritten by a sync from the provider.
    """

    id: UserId
    email: Optional[str] = None  # Cleared when the user is deleted
    name: str = "Artist"
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    deactivated_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_active(self) -> bool:
        """Whether the user may act on the platform."""
        return self.status == UserStatus.ACTIVE
