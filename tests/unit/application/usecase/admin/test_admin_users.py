"""Unit tests for admin user management use cases."""

from uuid import uuid4

import pytest

from folio.application.usecase.admin import (
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserAction,
)
from folio.adapter.error import ProviderError
from folio.domain.error import NotFoundError, ValidationError
from folio.domain.repository import UserRepository
from folio.domain.service import IdentityProviderClient, IdentityService
from folio.domain.value import UserRole, UserStatus
from tests.conftest import superadmin_email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed_accounts(unit_env):
    """Seed the superadmin and one artist; return (provider, admin, artist)."""
    provider = await unit_env.get(IdentityProviderClient)
    admin = provider.add_user(superadmin_email(), app_metadata={"roles": ["admin"]})
    artist = provider.add_user("jane@example.com", user_metadata={"full_name": "Jane"})
    return provider, admin, artist


class TestListUsers:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_merges_remote_accounts_with_local_status(self, unit_env):
        # Arrange
        provider, admin, artist = await seed_accounts(unit_env)
        identity = await unit_env.get(IdentityService)
        await identity.ensure_local_user(artist)
        await identity.set_status(artist.id, UserStatus.DEACTIVATED)
        use_case = await unit_env.get(ListUsersUseCase)

        # Act
        response = await use_case.execute()

        # Assert
        by_id = {item.id: item for item in response.users}
        assert by_id[str(admin.id)].is_superadmin is True
        assert by_id[str(admin.id)].role == "ADMIN"
        # No local row yet
        assert by_id[str(admin.id)].status == UserStatus.ACTIVE
        assert by_id[str(artist.id)].role == "ARTIST"
        assert by_id[str(artist.id)].display_name == "Jane"
        assert by_id[str(artist.id)].status == UserStatus.DEACTIVATED


class TestUpdateUser:
    """Tests for UpdateUserUseCase."""

    @pytest.mark.asyncio
    async def test_deactivate_then_activate(self, unit_env):
        # Arrange
        provider, admin, artist = await seed_accounts(unit_env)
        use_case = await unit_env.get(UpdateUserUseCase)

        # Act
        deactivated = await use_case.execute(
            str(artist.id), UpdateUserRequest(action=UserAction.DEACTIVATE), str(admin.id)
        )

        # Assert
        assert deactivated.status == UserStatus.DEACTIVATED
        banned = await provider.get_user(artist.id)
        assert banned.is_banned
        assert banned.user_metadata["deactivated"] is True
        local = await (await unit_env.get(UserRepository)).find_by_id(artist.id)
        assert local.deactivated_at is not None

        activated = await use_case.execute(
            str(artist.id), UpdateUserRequest(action=UserAction.ACTIVATE), str(admin.id)
        )
        assert activated.status == UserStatus.ACTIVE
        assert not (await provider.get_user(artist.id)).is_banned

    @pytest.mark.asyncio
    async def test_promote_to_admin(self, unit_env):
        provider, admin, artist = await seed_accounts(unit_env)
        use_case = await unit_env.get(UpdateUserUseCase)

        response = await use_case.execute(
            str(artist.id),
            UpdateUserRequest(action=UserAction.UPDATE_ROLE, role="Admin"),
            str(admin.id),
        )

        assert response.is_admin is True
        assert response.role == UserRole.USER
        remote = await provider.get_user(artist.id)
        assert remote.app_metadata["roles"] == ["admin"]
        assert remote.user_metadata["is_admin"] is True

    @pytest.mark.asyncio
    async def test_role_in_response_survives_next_sync(self, unit_env):
        provider, admin, artist = await seed_accounts(unit_env)
        use_case = await unit_env.get(UpdateUserUseCase)
        identity = await unit_env.get(IdentityService)

        response = await use_case.execute(
            str(artist.id),
            UpdateUserRequest(action=UserAction.UPDATE_ROLE, role="admin"),
            str(admin.id),
        )
        # What the next authenticated request of the promoted user does
        remote = await provider.get_user(artist.id)
        synced = await identity.ensure_local_user(remote)

        assert synced.role == response.role
        assert identity.is_admin(remote) is response.is_admin

    @pytest.mark.asyncio
    async def test_unknown_role(self, unit_env):
        _, admin, artist = await seed_accounts(unit_env)
        use_case = await unit_env.get(UpdateUserUseCase)

        with pytest.raises(ValidationError, match="Role must be"):
            await use_case.execute(
                str(artist.id),
                UpdateUserRequest(action=UserAction.UPDATE_ROLE, role="owner"),
                str(admin.id),
            )

    @pytest.mark.asyncio
    async def test_refuses_own_account(self, unit_env):
        _, admin, _ = await seed_accounts(unit_env)
        use_case = await unit_env.get(UpdateUserUseCase)

        with pytest.raises(ValidationError, match="your own account"):
            await use_case.execute(
                str(admin.id), UpdateUserRequest(action=UserAction.DEACTIVATE), str(admin.id)
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        _, admin, _ = await seed_accounts(unit_env)
        use_case = await unit_env.get(UpdateUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                str(uuid4()), UpdateUserRequest(action=UserAction.ACTIVATE), str(admin.id)
            )


class TestDeleteUser:
    """Tests for DeleteUserUseCase."""

    @pytest.mark.asyncio
    async def test_soft_deletes_local_and_removes_remote(self, unit_env):
        # Arrange
        provider, admin, artist = await seed_accounts(unit_env)
        use_case = await unit_env.get(DeleteUserUseCase)

        # Act
        await use_case.execute(str(artist.id), str(admin.id))

        # Assert
        assert await provider.get_user(artist.id) is None
        local = await (await unit_env.get(UserRepository)).find_by_id(artist.id)
        assert local.status == UserStatus.DELETED
        assert local.email is None

    @pytest.mark.asyncio
    async def test_deleted_user_stays_deleted_on_resync(self, unit_env):
        provider, admin, artist = await seed_accounts(unit_env)
        await (await unit_env.get(DeleteUserUseCase)).execute(str(artist.id), str(admin.id))

        user = await (await unit_env.get(IdentityService)).ensure_local_user(artist)

        assert user.status == UserStatus.DELETED

    @pytest.mark.asyncio
    async def test_refuses_own_account(self, unit_env):
        _, admin, _ = await seed_accounts(unit_env)
        use_case = await unit_env.get(DeleteUserUseCase)

        with pytest.raises(ValidationError, match="cannot delete your own account"):
            await use_case.execute(str(admin.id), str(admin.id))

    @pytest.mark.asyncio
    async def test_provider_failure_keeps_local_user(self, unit_env):
        # Arrange
        provider, admin, artist = await seed_accounts(unit_env)
        await (await unit_env.get(IdentityService)).ensure_local_user(artist)
        provider.fail_on_delete = True
        use_case = await unit_env.get(DeleteUserUseCase)

        # Act
        with pytest.raises(ProviderError):
            await use_case.execute(str(artist.id), str(admin.id))

        # Assert
        assert await provider.get_user(artist.id) is not None
        local = await (await unit_env.get(UserRepository)).find_by_id(artist.id)
        assert local.status == UserStatus.ACTIVE
        assert local.email == "jane@example.com"
