"""Unit tests for domain value objects."""

import secrets
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from folio.domain.value import InvitationToken, PortfolioSlug, RemoteUser, UserId


class TestInvitationToken:
    """Tests for InvitationToken."""

    def test_accepts_64_hex_chars(self):
        raw = secrets.token_hex(32)

        token = InvitationToken(raw)

        assert token.root == raw
        assert token.preview == raw[:8]

    @pytest.mark.parametrize("raw", ["", "abc", "z" * 64, "A" * 64, "a" * 65])
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError):
            InvitationToken(raw)


class TestPortfolioSlug:
    """Tests for PortfolioSlug."""

    @pytest.mark.parametrize("raw", ["jane", "jane-doe-2", "a" * 100])
    def test_valid(self, raw):
        assert PortfolioSlug(raw).root == raw

    @pytest.mark.parametrize("raw", ["ab", "Jane", "jane_doe", "a" * 101, "jane doe"])
    def test_invalid(self, raw):
        with pytest.raises(ValidationError):
            PortfolioSlug(raw)


class TestRemoteUser:
    """Tests for RemoteUser."""

    def test_not_banned_by_default(self):
        assert not RemoteUser(id=UserId(uuid4())).is_banned

    def test_ban_in_future(self):
        until = datetime.now(timezone.utc) + timedelta(days=1)

        assert RemoteUser(id=UserId(uuid4()), banned_until=until).is_banned

    def test_lapsed_ban(self):
        until = datetime.now(timezone.utc) - timedelta(days=1)

        assert not RemoteUser(id=UserId(uuid4()), banned_until=until).is_banned
