"""Update user use case (deactivate, activate, change role)."""

from enum import Enum
from uuid import UUID

import logfire
from pydantic import BaseModel

from folio.domain.error import NotFoundError, ValidationError
from folio.domain.model import User
from folio.domain.model.common import utc_now
from folio.domain.service import IdentityProviderClient, IdentityService
from folio.domain.service.identity_service import (
    ADMIN_APP_METADATA,
    ADMIN_USER_METADATA,
)
from folio.domain.value import RemoteUser, UserId, UserRole, UserStatus

# Effectively permanent (100 years); Supabase has no "forever" ban
PERMANENT_BAN = "876000h"
LIFT_BAN = "none"


class UserAction(str, Enum):
    """Administrative action on a user."""

    DEACTIVATE = "deactivate"
    ACTIVATE = "activate"
    UPDATE_ROLE = "update_role"


class UpdateUserRequest(BaseModel):
    """Update user request."""

    action: UserAction
    role: str | None = None  # "admin" or "artist", for update_role


class UpdateUserResponse(BaseModel):
    """Update user response."""

    id: str
    status: UserStatus
    role: UserRole  # Local role, ADMIN only for the superadmin
    is_admin: bool  # Admin marker on the identity provider account
    message: str


def parse_user_id(user_id: str) -> UserId:
    """Parse a user id from a path, treating garbage as not found."""
    try:
        return UserId(UUID(user_id))
    except ValueError:
        raise NotFoundError("User", user_id)


class UpdateUserUseCase:
    """Use case for superadmin changes to another user's account.

    The identity provider is updated first and the local row follows.
    Admin privilege lives only in the provider metadata: the local role is
    derived from the superadmin email on every sync and is never written
    here.
    """

    def __init__(
        self,
        identity_provider: IdentityProviderClient,
        identity_service: IdentityService,
    ) -> None:
        """Initialize update user use case.

        Args:
            identity_provider: Identity provider admin client
            identity_service: Identity domain service
        """
        self.identity_provider = identity_provider
        self.identity_service = identity_service

    async def execute(
        self, user_id: str, request: UpdateUserRequest, actor_id: str
    ) -> UpdateUserResponse:
        """Apply an action to a user.

        Args:
            user_id: Target user
            request: Action and its arguments
            actor_id: Superadmin performing the action

        Returns:
            The user's resulting status and role

        Raises:
            NotFoundError: If the account does not exist
            ValidationError: If the action targets the actor or the role is unknown
        """
        target_id = parse_user_id(user_id)

        with logfire.span(
            "update_user.execute", user_id=user_id, action=request.action.value
        ):
            remote = await self.identity_provider.get_user(target_id)
            if not remote:
                raise NotFoundError("User", user_id)

            if str(target_id) == actor_id:
                raise ValidationError("You cannot change your own account")

            await self.identity_service.ensure_local_user(remote)

            if request.action == UserAction.DEACTIVATE:
                remote, user = await self._deactivate(remote)
                message = "User deactivated"
            elif request.action == UserAction.ACTIVATE:
                remote, user = await self._activate(remote)
                message = "User activated"
            else:
                remote, user = await self._update_role(remote, request.role)
                message = "User role updated"

            logfire.info(
                message, user_id=user_id, actor_id=actor_id, status=user.status.value
            )
            return UpdateUserResponse(
                id=str(user.id),
                status=user.status,
                role=user.role,
                is_admin=self.identity_service.is_admin(remote),
                message=message,
            )

    async def _deactivate(self, remote: RemoteUser) -> tuple[RemoteUser, User]:
        updated = await self.identity_provider.update_user(
            remote.id,
            user_metadata={
                "deactivated": True,
                "deactivated_at": utc_now().isoformat(),
            },
            ban_duration=PERMANENT_BAN,
        )
        user = await self.identity_service.set_status(remote.id, UserStatus.DEACTIVATED)
        return updated, user

    async def _activate(self, remote: RemoteUser) -> tuple[RemoteUser, User]:
        updated = await self.identity_provider.update_user(
            remote.id,
            user_metadata={"deactivated": False, "deactivated_at": None},
            ban_duration=LIFT_BAN,
        )
        user = await self.identity_service.set_status(remote.id, UserStatus.ACTIVE)
        return updated, user

    async def _update_role(
        self, remote: RemoteUser, role: str | None
    ) -> tuple[RemoteUser, User]:
        normalized = (role or "").strip().lower()
        if normalized == "admin":
            updated = await self.identity_provider.update_user(
                remote.id,
                user_metadata=ADMIN_USER_METADATA,
                app_metadata=ADMIN_APP_METADATA,
            )
        elif normalized == "artist":
            updated = await self.identity_provider.update_user(
                remote.id,
                user_metadata={"is_admin": False, "role": "ARTIST"},
                app_metadata={"roles": ["artist"]},
            )
        else:
            raise ValidationError("Role must be 'admin' or 'artist'", field="role")

        return updated, await self.identity_service.ensure_local_user(updated)
