"""Tests for the Supabase admin clients."""

import json
import uuid

import httpx
import pytest

from folio.adapter.error import AccountExistsError, ProviderError
from folio.adapter.supabase import MockSupabaseAdminClient, RealSupabaseAdminClient
from folio.domain.value import UserId

PROJECT_URL = "https://project.supabase.co"


def gotrue_user(email: str, **extra) -> dict:
    return {
        "id": str(uuid.uuid4()),
        "email": email,
        "user_metadata": {},
        "app_metadata": {"provider": "email"},
        "email_confirmed_at": "2024-01-01T00:00:00Z",
        **extra,
    }


def client_for(handler) -> RealSupabaseAdminClient:
    return RealSupabaseAdminClient(
        PROJECT_URL, "service-key", transport=httpx.MockTransport(handler)
    )


class TestRealClient:
    """Tests for RealSupabaseAdminClient against a mocked transport."""

    @pytest.mark.asyncio
    async def test_create_user_sends_confirmed_account(self):
        # Arrange
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["apikey"] = request.headers["apikey"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=gotrue_user("jane@example.com"))

        client = client_for(handler)

        # Act
        user = await client.create_user(
            "jane@example.com", "Sup3rSecret", {"full_name": "Jane"}, {}
        )

        # Assert
        assert user.email == "jane@example.com"
        assert seen["method"] == "POST"
        assert seen["path"] == "/auth/v1/admin/users"
        assert seen["apikey"] == "service-key"
        assert seen["body"]["email_confirm"] is True
        assert seen["body"]["user_metadata"] == {"full_name": "Jane"}

    @pytest.mark.asyncio
    async def test_create_user_existing_email(self):
        client = client_for(lambda request: httpx.Response(422, json={"msg": "exists"}))

        with pytest.raises(AccountExistsError):
            await client.create_user("jane@example.com", "Sup3rSecret", {}, {})

    @pytest.mark.asyncio
    async def test_get_user_missing_returns_none(self):
        client = client_for(lambda request: httpx.Response(404, json={}))

        assert await client.get_user(UserId(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_server_error_is_provider_error(self):
        client = client_for(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(ProviderError):
            await client.list_users()

    @pytest.mark.asyncio
    async def test_transport_failure_is_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ProviderError, match="unreachable"):
            await client_for(handler).get_user(UserId(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self):
        users = [gotrue_user("other@example.com"), gotrue_user("Jane@Example.com")]
        client = client_for(lambda request: httpx.Response(200, json={"users": users}))

        found = await client.find_user_by_email(" jane@example.com ")

        assert found is not None
        assert str(found.id) == users[1]["id"]

    @pytest.mark.asyncio
    async def test_update_user_sends_only_given_fields(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=gotrue_user("jane@example.com"))

        await client_for(handler).update_user(
            UserId(uuid.uuid4()), ban_duration="876000h"
        )

        assert seen["method"] == "PUT"
        assert seen["body"] == {"ban_duration": "876000h"}

    @pytest.mark.asyncio
    async def test_delete_missing_user_is_not_an_error(self):
        client = client_for(lambda request: httpx.Response(404, json={}))

        await client.delete_user(UserId(uuid.uuid4()))


class TestMockClient:
    """Tests for MockSupabaseAdminClient."""

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_email(self):
        client = MockSupabaseAdminClient()
        client.add_user("jane@example.com")

        with pytest.raises(AccountExistsError):
            await client.create_user("JANE@example.com", "Sup3rSecret", {}, {})

    @pytest.mark.asyncio
    async def test_update_merges_metadata_and_bans(self):
        client = MockSupabaseAdminClient()
        user = client.add_user("jane@example.com", user_metadata={"full_name": "Jane"})

        banned = await client.update_user(
            user.id, user_metadata={"role": "artist"}, ban_duration="876000h"
        )
        assert banned.user_metadata == {"full_name": "Jane", "role": "artist"}
        assert banned.is_banned

        unbanned = await client.update_user(user.id, ban_duration="none")
        assert not unbanned.is_banned

    @pytest.mark.asyncio
    async def test_fail_on_create(self):
        client = MockSupabaseAdminClient()
        client.fail_on_create = True

        with pytest.raises(ProviderError):
            await client.create_user("jane@example.com", "Sup3rSecret", {}, {})
        assert client.users == {}
