"""List users use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from folio.domain.service import IdentityProviderClient, IdentityService
from folio.domain.service.identity_service import display_name_for
from folio.domain.value import UserStatus


class UserItem(BaseModel):
    """A user as shown to the superadmin."""

    id: str
    email: str | None
    display_name: str
    role: str  # "ADMIN" or "ARTIST"
    is_superadmin: bool
    status: UserStatus
    is_banned: bool
    email_confirmed: bool
    created_at: datetime | None
    last_sign_in_at: datetime | None


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserItem]


class ListUsersUseCase:
    """Use case listing identity provider accounts with their local status."""

    def __init__(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
    ) -> None:
        self.identity_provider = identity_provider
        self.identity_service = identity_service

    async def execute(self) -> ListUsersResponse:
        """List every account, newest first.

        Accounts without a local row are reported as ACTIVE.
        """
        with logfire.span("list_users.execute"):
            remotes = await self.identity_provider.list_users()
            local = await self.identity_service.statuses_for([r.id for r in remotes])

            items = []
            for remote in remotes:
                user = local.get(remote.id)
                items.append(
                    UserItem(
                        id=str(remote.id),
                        email=remote.email,
                        display_name=display_name_for(remote),
                        role="ADMIN" if self.identity_service.is_admin(remote) else "ARTIST",
                        is_superadmin=self.identity_service.is_superadmin(remote),
                        status=user.status if user else UserStatus.ACTIVE,
                        is_banned=remote.is_banned,
                        email_confirmed=remote.email_confirmed_at is not None,
                        created_at=remote.created_at,
                        last_sign_in_at=remote.last_sign_in_at,
                    )
                )

            items.sort(
                key=lambda item: item.created_at.timestamp() if item.created_at else 0,
                reverse=True,
            )
            return ListUsersResponse(users=items)
