"""Identity bridge between the hosted identity provider and local users."""

from typing import Any

import logfire

from folio.domain.error import NotFoundError
from folio.domain.model import User
from folio.domain.model.common import utc_now
from folio.domain.repository import UserRepository
from folio.domain.value import RemoteUser, UserId, UserRole, UserStatus


DEFAULT_USER_NAME = "Artist"

# Metadata marking an account as admin for is_admin
ADMIN_USER_METADATA = {"is_admin": True, "role": "ADMIN"}
ADMIN_APP_METADATA = {"roles": ["admin"]}


class IdentityProviderClient:
    """Generic admin client interface for the hosted identity provider."""

    async def get_user(self, user_id: UserId) -> RemoteUser | None:
        """Fetch an account by id.

        Returns:
            The account, or None if it does not exist
        """
        raise NotImplementedError

    async def find_user_by_email(self, email: str) -> RemoteUser | None:
        """Find an account by email (case-insensitive)."""
        raise NotImplementedError

    async def list_users(self) -> list[RemoteUser]:
        """List every account in the project."""
        raise NotImplementedError

    async def create_user(
        self,
        email: str,
        password: str,
        user_metadata: dict[str, Any],
        app_metadata: dict[str, Any],
    ) -> RemoteUser:
        """Create a confirmed account.

        Raises:
            AccountExistsError: If the email is already registered
        """
        raise NotImplementedError

    async def update_user(
        self,
        user_id: UserId,
        user_metadata: dict[str, Any] | None = None,
        app_metadata: dict[str, Any] | None = None,
        ban_duration: str | None = None,
    ) -> RemoteUser:
        """Update metadata and/or ban state of an account.

        Metadata maps are merged into the stored ones by the provider.
        """
        raise NotImplementedError

    async def delete_user(self, user_id: UserId) -> None:
        """Delete an account."""
        raise NotImplementedError


def display_name_for(remote: RemoteUser) -> str:
    """Pick a display name: full_name, then name, then email local part."""
    metadata = remote.user_metadata or {}
    for key in ("full_name", "name"):
        value = metadata.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    if remote.email and remote.email.split("@", 1)[0]:
        return remote.email.split("@", 1)[0]
    return DEFAULT_USER_NAME


class IdentityService:
    """Domain service keeping local users in sync and classifying privilege.

    The superadmin email is configuration injected at construction.
    """

    def __init__(self, user_repository: UserRepository, superadmin_email: str) -> None:
        """Initialize identity service.

        Args:
            user_repository: User repository
            superadmin_email: Email of the single superadmin account
        """
        self.user_repository = user_repository
        self.superadmin_email = superadmin_email.strip().lower()

    def is_admin(self, remote: RemoteUser) -> bool:
        """Classify an account as admin.

        Any one of three markers is sufficient: ``admin`` in
        ``app_metadata.roles``, ``user_metadata.role`` equal to ``admin`` in
        any case, or ``user_metadata.is_admin`` set to true.
        """
        roles = (remote.app_metadata or {}).get("roles") or []
        if isinstance(roles, list) and "admin" in roles:
            return True

        metadata = remote.user_metadata or {}
        role = metadata.get("role")
        if isinstance(role, str) and role.lower() == "admin":
            return True

        return metadata.get("is_admin") is True

    def is_superadmin_email(self, email: str | None) -> bool:
        """Whether an email is the configured superadmin email."""
        return bool(email) and email.strip().lower() == self.superadmin_email

    def is_superadmin(self, remote: RemoteUser) -> bool:
        """Classify an account as the superadmin.

        Requires both an admin marker and the configured email.
        """
        return self.is_admin(remote) and self.is_superadmin_email(remote.email)

    async def ensure_local_user(self, remote: RemoteUser) -> User:
        """Create or refresh the local user for a remote account.

        Idempotent. Email, name and role follow the remote account; status is
        owned locally and never overwritten, and a deleted user stays deleted.

        Args:
            remote: Account from the identity provider

        Returns:
            The local user as stored
        """
        with logfire.span("identity_service.ensure_local_user", user_id=str(remote.id)):
            role = (
                UserRole.ADMIN
                if self.is_superadmin_email(remote.email)
                else UserRole.USER
            )
            candidate = User(
                id=remote.id,
                email=remote.email.strip().lower() if remote.email else None,
                name=display_name_for(remote),
                role=role,
                status=UserStatus.ACTIVE,
            )
            user = await self.user_repository.upsert_from_remote(candidate)
            logfire.debug(
                "Local user synced",
                user_id=str(user.id),
                role=user.role.value,
                status=user.status.value,
            )
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get local user by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    async def statuses_for(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load local users for a batch of remote ids, keyed by id."""
        users = await self.user_repository.find_by_ids(user_ids)
        return {user.id: user for user in users}

    async def set_status(self, user_id: UserId, status: UserStatus) -> User:
        """Move a local user to a new lifecycle state.

        Deactivation records the time; reactivation clears it. Deleting also
        clears the email so it can be registered again.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "identity_service.set_status", user_id=str(user_id), status=status.value
        ):
            user = await self.get_by_id(user_id)
            update: dict[str, object] = {"status": status, "updated_at": utc_now()}
            if status == UserStatus.ACTIVE:
                update["deactivated_at"] = None
            else:
                update["deactivated_at"] = utc_now()
            if status == UserStatus.DELETED:
                update["email"] = None

            saved = await self.user_repository.save(user.model_copy(update=update))
            logfire.info("User status changed", user_id=str(user_id), status=status.value)
            return saved
