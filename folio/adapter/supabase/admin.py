"""Supabase Auth (GoTrue) admin API client.

Uses the service-role key, so it must only ever run server-side.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import logfire

from folio.adapter.error import AccountExistsError, ProviderError
from folio.domain.service.identity_service import IdentityProviderClient
from folio.domain.value import RemoteUser, UserId

PAGE_SIZE = 1000

# Supabase accepts Go duration strings; "none" lifts a ban
_NO_BAN = "none"


def to_remote_user(data: dict[str, Any]) -> RemoteUser:
    """Build a RemoteUser from a GoTrue user object."""
    return RemoteUser(
        id=UserId(uuid.UUID(str(data["id"]))),
        email=data.get("email") or None,
        user_metadata=data.get("user_metadata") or {},
        app_metadata=data.get("app_metadata") or {},
        email_confirmed_at=data.get("email_confirmed_at"),
        banned_until=data.get("banned_until"),
        created_at=data.get("created_at"),
        last_sign_in_at=data.get("last_sign_in_at"),
    )


class SupabaseAdminClient(IdentityProviderClient):
    """Base class for Supabase admin clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealSupabaseAdminClient(SupabaseAdminClient):
    """Supabase admin client over HTTP."""

    def __init__(
        self,
        url: str,
        service_role_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Supabase admin client.

        Args:
            url: Supabase project URL
            service_role_key: Service-role API key
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = f"{url.rstrip('/')}/auth/v1/admin"
        self.service_role_key = service_role_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                return await client.request(
                    method,
                    f"{self.base_url}{path}",
                    json=json,
                    params=params,
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logfire.error("Supabase request failed", method=method, path=path, error=str(e))
            raise ProviderError(f"Identity provider unreachable: {e}") from e

    @staticmethod
    def _raise_for_status(response: httpx.Response, action: str) -> None:
        if response.is_success:
            return
        logfire.error(
            "Supabase admin call failed",
            action=action,
            status_code=response.status_code,
            body=response.text[:500],
        )
        raise ProviderError(
            f"Identity provider rejected {action} ({response.status_code})"
        )

    async def get_user(self, user_id: UserId) -> RemoteUser | None:
        """Fetch an account by id."""
        with logfire.span("supabase.get_user", user_id=str(user_id)):
            response = await self._request("GET", f"/users/{user_id}")
            if response.status_code == 404:
                return None
            self._raise_for_status(response, "get_user")
            return to_remote_user(response.json())

    async def list_users(self) -> list[RemoteUser]:
        """List every account, following pagination."""
        with logfire.span("supabase.list_users"):
            users: list[RemoteUser] = []
            page = 1
            while True:
                response = await self._request(
                    "GET", "/users", params={"page": page, "per_page": PAGE_SIZE}
                )
                self._raise_for_status(response, "list_users")
                batch = response.json().get("users") or []
                users.extend(to_remote_user(item) for item in batch)
                if len(batch) < PAGE_SIZE:
                    break
                page += 1

            logfire.debug("Listed Supabase users", count=len(users))
            return users

    async def find_user_by_email(self, email: str) -> RemoteUser | None:
        """Find an account by email by scanning the user list."""
        wanted = email.strip().lower()
        for user in await self.list_users():
            if user.email and user.email.lower() == wanted:
                return user
        return None

    async def create_user(
        self,
        email: str,
        password: str,
        user_metadata: dict[str, Any],
        app_metadata: dict[str, Any],
    ) -> RemoteUser:
        """Create a confirmed account.

        Raises:
            AccountExistsError: If the email is already registered (422)
            ProviderError: On any other failure
        """
        with logfire.span("supabase.create_user", email=email):
            response = await self._request(
                "POST",
                "/users",
                json={
                    "email": email,
                    "password": password,
                    "email_confirm": True,
                    "user_metadata": user_metadata,
                    "app_metadata": app_metadata,
                },
            )
            if response.status_code == 422:
                logfire.warn("Supabase account already exists", email=email)
                raise AccountExistsError("An account with this email already exists")
            self._raise_for_status(response, "create_user")

            user = to_remote_user(response.json())
            logfire.info("Supabase account created", user_id=str(user.id))
            return user

    async def update_user(
        self,
        user_id: UserId,
        user_metadata: dict[str, Any] | None = None,
        app_metadata: dict[str, Any] | None = None,
        ban_duration: str | None = None,
    ) -> RemoteUser:
        """Update metadata and/or ban state of an account."""
        payload: dict[str, Any] = {}
        if user_metadata is not None:
            payload["user_metadata"] = user_metadata
        if app_metadata is not None:
            payload["app_metadata"] = app_metadata
        if ban_duration is not None:
            payload["ban_duration"] = ban_duration

        with logfire.span(
            "supabase.update_user", user_id=str(user_id), fields=sorted(payload)
        ):
            response = await self._request("PUT", f"/users/{user_id}", json=payload)
            self._raise_for_status(response, "update_user")
            return to_remote_user(response.json())

    async def delete_user(self, user_id: UserId) -> None:
        """Delete an account; a missing account counts as deleted."""
        with logfire.span("supabase.delete_user", user_id=str(user_id)):
            response = await self._request("DELETE", f"/users/{user_id}")
            if response.status_code == 404:
                logfire.warn("Supabase account already gone", user_id=str(user_id))
                return
            self._raise_for_status(response, "delete_user")
            logfire.info("Supabase account deleted", user_id=str(user_id))


def _parse_ban_duration(ban_duration: str) -> datetime | None:
    """Translate an hours-based Go duration ("876000h") into banned_until."""
    if ban_duration == _NO_BAN:
        return None
    hours = int(ban_duration.rstrip("h"))
    return datetime.now(timezone.utc) + timedelta(hours=hours)


class MockSupabaseAdminClient(SupabaseAdminClient):
    """In-memory Supabase admin client for testing.

    Mirrors the merge semantics of the real API for metadata updates.
    """

    def __init__(self) -> None:
        """Initialize mock client with an empty account store."""
        self.users: dict[UserId, RemoteUser] = {}
        self.passwords: dict[UserId, str] = {}
        self.fail_on_create = False
        self.fail_on_delete = False

    def add_user(
        self,
        email: str,
        user_metadata: dict[str, Any] | None = None,
        app_metadata: dict[str, Any] | None = None,
        user_id: UserId | None = None,
    ) -> RemoteUser:
        """Seed an account directly (test helper)."""
        user = RemoteUser(
            id=user_id or UserId(uuid.uuid4()),
            email=email.lower(),
            user_metadata=user_metadata or {},
            app_metadata=app_metadata or {},
            email_confirmed_at=datetime.now(timezone.utc),
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        return user

    async def get_user(self, user_id: UserId) -> RemoteUser | None:
        """Fetch an account by id."""
        return self.users.get(user_id)

    async def list_users(self) -> list[RemoteUser]:
        """List every account."""
        return list(self.users.values())

    async def find_user_by_email(self, email: str) -> RemoteUser | None:
        """Find an account by email."""
        wanted = email.strip().lower()
        return next(
            (u for u in self.users.values() if u.email and u.email.lower() == wanted),
            None,
        )

    async def create_user(
        self,
        email: str,
        password: str,
        user_metadata: dict[str, Any],
        app_metadata: dict[str, Any],
    ) -> RemoteUser:
        """Create an account in memory."""
        if self.fail_on_create:
            raise ProviderError("Identity provider rejected create_user (500)")
        if await self.find_user_by_email(email):
            raise AccountExistsError("An account with this email already exists")

        user = self.add_user(email, user_metadata, app_metadata)
        self.passwords[user.id] = password
        return user

    async def update_user(
        self,
        user_id: UserId,
        user_metadata: dict[str, Any] | None = None,
        app_metadata: dict[str, Any] | None = None,
        ban_duration: str | None = None,
    ) -> RemoteUser:
        """Update an account in memory."""
        user = self.users.get(user_id)
        if not user:
            raise ProviderError("Identity provider rejected update_user (404)")

        update: dict[str, Any] = {}
        if user_metadata is not None:
            update["user_metadata"] = {**user.user_metadata, **user_metadata}
        if app_metadata is not None:
            update["app_metadata"] = {**user.app_metadata, **app_metadata}
        if ban_duration is not None:
            update["banned_until"] = _parse_ban_duration(ban_duration)

        updated = user.model_copy(update=update)
        self.users[user_id] = updated
        return updated

    async def delete_user(self, user_id: UserId) -> None:
        """Delete an account in memory."""
        if self.fail_on_delete:
            raise ProviderError("Identity provider rejected delete_user (500)")
        self.users.pop(user_id, None)
        self.passwords.pop(user_id, None)
