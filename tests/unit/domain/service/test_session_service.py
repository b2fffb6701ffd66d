"""Unit tests for SessionService."""

from uuid import uuid4

import pytest

from folio.config import SupabaseSettings
from folio.domain.service import SessionService
from folio.util.jwt import JWTError, create_access_token

SETTINGS = SupabaseSettings(jwt_secret="test_secret_that_is_long_enough_for_hs256")


class TestSessionService:
    """Tests for SessionService."""

    def test_verify_builds_remote_user(self):
        user_id = uuid4()
        token = create_access_token(
            str(user_id), "jane@example.com", SETTINGS, user_metadata={"name": "Jane"}
        )

        remote = SessionService(SETTINGS).verify(token)

        assert remote.id == user_id
        assert remote.email == "jane@example.com"
        assert remote.user_metadata == {"name": "Jane"}

    def test_subject_must_be_uuid(self):
        token = create_access_token("not-a-uuid", None, SETTINGS)

        with pytest.raises(JWTError):
            SessionService(SETTINGS).verify(token)

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_user_from_token_swallows_failures(self, token):
        assert SessionService(SETTINGS).user_from_token(token) is None
