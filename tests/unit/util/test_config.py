"""Unit tests for application settings."""

import pytest

from folio.config import Settings
from folio.util.error import ConfigurationError


def settings(**overrides) -> Settings:
    values = {"public_base_url": None, "platform_url": None, **overrides}
    return Settings(**values)


class TestResolveBaseUrl:
    """Tests for Settings.resolve_base_url."""

    def test_explicit_url_wins(self):
        s = settings(public_base_url="https://folio.example.com/", platform_url="x.vercel.app")

        assert s.resolve_base_url() == "https://folio.example.com"

    def test_scheme_added_when_missing(self):
        assert settings(public_base_url="folio.example.com").resolve_base_url() == (
            "https://folio.example.com"
        )

    def test_platform_hostname(self):
        assert settings(platform_url="folio-abc.vercel.app").resolve_base_url() == (
            "https://folio-abc.vercel.app"
        )

    def test_localhost_outside_production(self):
        assert settings(environment="development").resolve_base_url() == (
            "http://localhost:3000"
        )

    def test_localhost_rejected_in_production(self):
        s = settings(environment="production", public_base_url="http://localhost:3000")

        with pytest.raises(ConfigurationError):
            s.resolve_base_url()

    def test_localhost_in_production_falls_back_to_platform(self):
        s = settings(
            environment="production",
            public_base_url="http://localhost:3000",
            platform_url="folio.vercel.app",
        )

        assert s.resolve_base_url() == "https://folio.vercel.app"

    def test_nothing_configured_in_production(self):
        with pytest.raises(ConfigurationError, match="Base URL not configured"):
            settings(environment="production").resolve_base_url()


class TestSuperadminEmail:
    """Tests for the top-level superadmin alias."""

    def test_alias_folds_into_admin_settings(self):
        s = Settings(superadmin_email="owner@example.com")

        assert s.admin.superadmin_email == "owner@example.com"
