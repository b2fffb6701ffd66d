"""Unit tests for EnsureSuperadminUseCase."""

import pytest

from folio.application.usecase.admin import EnsureSuperadminUseCase
from folio.domain.error import ValidationError
from folio.domain.repository import UserRepository
from folio.domain.service import IdentityProviderClient, IdentityService
from folio.domain.value import UserRole
from tests.conftest import superadmin_email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestEnsureSuperadmin:
    """Tests for EnsureSuperadminUseCase."""

    @pytest.mark.asyncio
    async def test_creates_missing_account_as_superadmin(self, unit_env):
        # Arrange
        provider = await unit_env.get(IdentityProviderClient)
        identity = await unit_env.get(IdentityService)
        use_case = await unit_env.get(EnsureSuperadminUseCase)

        # Act
        response = await use_case.execute("Sup3rSecret")

        # Assert
        assert response.created is True
        assert response.email == superadmin_email()
        remote = await provider.find_user_by_email(superadmin_email())
        assert str(remote.id) == response.user_id
        assert identity.is_superadmin(remote)
        assert remote.user_metadata == {"is_admin": True, "role": "ADMIN"}
        assert remote.app_metadata == {"roles": ["admin"]}
        assert provider.passwords[remote.id] == "Sup3rSecret"

        users = await unit_env.get(UserRepository)
        local = await users.find_by_id(remote.id)
        assert local.role == UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_promotes_existing_account_without_password(self, unit_env):
        # Arrange
        provider = await unit_env.get(IdentityProviderClient)
        identity = await unit_env.get(IdentityService)
        existing = provider.add_user(
            superadmin_email(), user_metadata={"full_name": "Owner"}
        )
        assert not identity.is_admin(existing)
        use_case = await unit_env.get(EnsureSuperadminUseCase)

        # Act
        response = await use_case.execute()

        # Assert
        assert response.created is False
        assert response.user_id == str(existing.id)
        remote = await provider.get_user(existing.id)
        assert identity.is_superadmin(remote)
        assert remote.user_metadata["full_name"] == "Owner"
        assert len(provider.users) == 1

    @pytest.mark.asyncio
    async def test_running_twice_is_idempotent(self, unit_env):
        provider = await unit_env.get(IdentityProviderClient)
        use_case = await unit_env.get(EnsureSuperadminUseCase)

        first = await use_case.execute("Sup3rSecret")
        second = await use_case.execute()

        assert second.created is False
        assert second.user_id == first.user_id
        assert len(provider.users) == 1

    @pytest.mark.asyncio
    async def test_missing_account_requires_password(self, unit_env):
        provider = await unit_env.get(IdentityProviderClient)
        use_case = await unit_env.get(EnsureSuperadminUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute()

        assert exc_info.value.field == "password"
        assert provider.users == {}

    @pytest.mark.asyncio
    async def test_weak_password_is_rejected_before_creation(self, unit_env):
        provider = await unit_env.get(IdentityProviderClient)
        use_case = await unit_env.get(EnsureSuperadminUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute("short")

        assert provider.users == {}
