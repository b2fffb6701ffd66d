"""Configuration providers.

Settings are read once per process; each section is exposed on its own so
consumers depend on the narrowest slice they need.
"""

from dishka import Scope, provide

from folio.config import AdminSettings, InvitationSettings, Settings, SupabaseSettings
from folio.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_supabase_settings(self, settings: Settings) -> SupabaseSettings:
        return settings.supabase

    @provide
    def provide_admin_settings(self, settings: Settings) -> AdminSettings:
        return settings.admin

    @provide
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations
