"""Unit tests for IdentityService."""

from uuid import uuid4

import pytest

from folio.domain.error import NotFoundError
from folio.domain.repository import UserRepository
from folio.domain.service import IdentityService
from folio.domain.service.identity_service import display_name_for
from folio.domain.value import UserId, UserRole, UserStatus
from tests.conftest import make_remote_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

SUPERADMIN = "owner@example.com"


def identity_service(user_repository: UserRepository) -> IdentityService:
    return IdentityService(user_repository, superadmin_email=SUPERADMIN)


class TestIsAdmin:
    """Tests for the tri-modal admin classification."""

    @pytest.mark.asyncio
    async def test_app_metadata_roles(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user(app_metadata={"roles": ["artist", "admin"]})
        assert service.is_admin(remote) is True

    @pytest.mark.asyncio
    async def test_user_metadata_role_any_case(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user(user_metadata={"role": "AdMiN"})
        assert service.is_admin(remote) is True

    @pytest.mark.asyncio
    async def test_user_metadata_is_admin_flag(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))
        assert service.is_admin(make_remote_user(user_metadata={"is_admin": True}))
        assert not service.is_admin(make_remote_user(user_metadata={"is_admin": "yes"}))

    @pytest.mark.asyncio
    async def test_no_marker_is_not_admin(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user(
            user_metadata={"role": "ARTIST"}, app_metadata={"roles": ["artist"]}
        )
        assert service.is_admin(remote) is False


class TestIsSuperadmin:
    """Tests for is_superadmin."""

    @pytest.mark.asyncio
    async def test_requires_admin_marker_and_email(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))

        admin_owner = make_remote_user(
            email="Owner@Example.com", app_metadata={"roles": ["admin"]}
        )
        plain_owner = make_remote_user(email=SUPERADMIN)
        other_admin = make_remote_user(
            email="admin2@example.com", app_metadata={"roles": ["admin"]}
        )

        assert service.is_superadmin(admin_owner) is True
        assert service.is_superadmin(plain_owner) is False
        assert service.is_superadmin(other_admin) is False


class TestDisplayName:
    """Tests for display name fallbacks."""

    def test_prefers_full_name(self):
        remote = make_remote_user(user_metadata={"full_name": " Jane ", "name": "J"})
        assert display_name_for(remote) == "Jane"

    def test_falls_back_to_name_then_email(self):
        assert display_name_for(make_remote_user(user_metadata={"name": "JD"})) == "JD"
        assert display_name_for(make_remote_user(email="jd@example.com")) == "jd"

    def test_falls_back_to_artist(self):
        assert display_name_for(make_remote_user(email=None)) == "Artist"


class TestEnsureLocalUser:
    """Tests for ensure_local_user."""

    @pytest.mark.asyncio
    async def test_creates_user_from_remote(self, unit_env):
        # Arrange
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user(
            email="Jane@Example.com", user_metadata={"full_name": "Jane Doe"}
        )

        # Act
        user = await service.ensure_local_user(remote)

        # Assert
        assert user.id == remote.id
        assert user.email == "jane@example.com"
        assert user.name == "Jane Doe"
        assert user.role == UserRole.USER
        assert user.status == UserStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_superadmin_email_gets_admin_role(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))
        user = await service.ensure_local_user(make_remote_user(email="OWNER@example.com"))
        assert user.role == UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        repo = await unit_env.get(UserRepository)
        service = identity_service(repo)
        remote = make_remote_user(user_metadata={"full_name": "Jane"})

        first = await service.ensure_local_user(remote)
        second = await service.ensure_local_user(remote)

        assert second.id == first.id
        assert second.name == first.name
        assert second.created_at == first.created_at
        assert len(await repo.find_by_ids([remote.id])) == 1

    @pytest.mark.asyncio
    async def test_refresh_keeps_local_status(self, unit_env):
        # Arrange
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user(user_metadata={"full_name": "Jane"})
        await service.ensure_local_user(remote)
        await service.set_status(remote.id, UserStatus.DEACTIVATED)

        # Act
        renamed = remote.model_copy(update={"user_metadata": {"full_name": "Janet"}})
        user = await service.ensure_local_user(renamed)

        # Assert
        assert user.name == "Janet"
        assert user.status == UserStatus.DEACTIVATED

    @pytest.mark.asyncio
    async def test_deleted_user_is_left_untouched(self, unit_env):
        # Arrange
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user(user_metadata={"full_name": "Jane"})
        await service.ensure_local_user(remote)
        await service.set_status(remote.id, UserStatus.DELETED)

        # Act
        user = await service.ensure_local_user(remote)

        # Assert
        assert user.status == UserStatus.DELETED
        assert user.email is None


class TestSetStatus:
    """Tests for set_status."""

    @pytest.mark.asyncio
    async def test_deactivate_then_activate_manages_timestamp(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user()
        await service.ensure_local_user(remote)

        deactivated = await service.set_status(remote.id, UserStatus.DEACTIVATED)
        assert deactivated.deactivated_at is not None
        assert deactivated.is_active is False

        activated = await service.set_status(remote.id, UserStatus.ACTIVE)
        assert activated.deactivated_at is None
        assert activated.is_active is True

    @pytest.mark.asyncio
    async def test_delete_clears_email(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))
        remote = make_remote_user()
        await service.ensure_local_user(remote)

        deleted = await service.set_status(remote.id, UserStatus.DELETED)

        assert deleted.status == UserStatus.DELETED
        assert deleted.email is None

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, unit_env):
        service = identity_service(await unit_env.get(UserRepository))

        with pytest.raises(NotFoundError):
            await service.set_status(UserId(uuid4()), UserStatus.DEACTIVATED)
