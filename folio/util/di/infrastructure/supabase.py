"""Identity provider (Supabase Auth) infrastructure providers."""

from dishka import Scope, provide

from folio.adapter.supabase.admin import RealSupabaseAdminClient
from folio.config import SupabaseSettings
from folio.domain.service import IdentityProviderClient
from folio.util.di.base import ProviderBase
from folio.util.observability import instrument_httpx


class SupabaseProvider(ProviderBase):
    """Supabase component base."""

    __mock_component__ = "supabase"


class ProdSupabaseProvider(SupabaseProvider):
    """Production Supabase provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(
        self, supabase_settings: SupabaseSettings
    ) -> IdentityProviderClient:
        """Provide the Supabase admin client.

        Returns:
            Client authenticated with the service-role key
        """
        instrument_httpx()
        return RealSupabaseAdminClient(
            url=supabase_settings.url,
            service_role_key=supabase_settings.service_role_key,
        )
