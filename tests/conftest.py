"""Test configuration and fixtures."""

import secrets
from datetime import timedelta
from typing import Any
from uuid import UUID, uuid4

from folio.config import Settings
from folio.domain.model import Invitation
from folio.domain.model.common import utc_now
from folio.domain.value import (
    InvitationId,
    InvitationStatus,
    InvitationToken,
    RemoteUser,
    UserId,
)
from folio.util.jwt import create_access_token

VALID_PASSWORD = "Sup3rSecret"


def superadmin_email() -> str:
    """The superadmin email the app under test is configured with."""
    return Settings().admin.superadmin_email


def make_remote_user(
    email: str = "artist@example.com",
    user_metadata: dict[str, Any] | None = None,
    app_metadata: dict[str, Any] | None = None,
) -> RemoteUser:
    """Build a remote account without touching the identity provider."""
    return RemoteUser(
        id=UserId(uuid4()),
        email=email,
        user_metadata=user_metadata or {},
        app_metadata=app_metadata or {},
    )


def make_invitation(
    invited_by: UserId | None = None,
    email: str = "",
    status: InvitationStatus = InvitationStatus.PENDING,
    age: timedelta = timedelta(0),
    ttl: timedelta = timedelta(days=7),
) -> Invitation:
    """Build an invitation created ``age`` ago.

    Pass an age beyond the ttl for an invitation past its expiry.
    """
    created_at = utc_now() - age
    return Invitation(
        id=InvitationId(uuid4()),
        email=email,
        token=InvitationToken(secrets.token_hex(32)),
        status=status,
        invited_by=invited_by or UserId(uuid4()),
        created_at=created_at,
        expires_at=created_at + ttl,
    )


def access_token_for(remote: RemoteUser) -> str:
    """Mint an access token for the account, as the identity provider would."""
    return create_access_token(
        str(remote.id),
        remote.email,
        Settings().supabase,
        user_metadata=remote.user_metadata,
        app_metadata=remote.app_metadata,
    )


def bearer_for(remote: RemoteUser) -> dict[str, str]:
    """Authorization header carrying an access token for the account."""
    return {"Authorization": f"Bearer {access_token_for(remote)}"}


def superadmin() -> RemoteUser:
    """The configured superadmin, as the identity provider would describe it."""
    return make_remote_user(superadmin_email(), app_metadata={"roles": ["admin"]})


def signup_artist(client, admin_headers: dict[str, str], email: str, slug: str) -> RemoteUser:
    """Invite and sign up an artist through the API.

    Returns:
        The new account, ready for bearer_for
    """
    invited = client.post("/invitations", json={"email": email}, headers=admin_headers)
    assert invited.status_code == 201, invited.text
    token = invited.json()["invite_link"].split("token=", 1)[1]

    completed = client.post(
        "/signup/complete",
        json={
            "token": token,
            "email": email,
            "slug": slug,
            "display_name": slug.replace("-", " ").title(),
            "password": VALID_PASSWORD,
        },
    )
    assert completed.status_code == 201, completed.text
    return RemoteUser(id=UserId(UUID(completed.json()["user_id"])), email=email)
