"""Mock Supabase providers for testing."""

from dishka import Scope, provide

from folio.adapter.supabase import MockSupabaseAdminClient
from folio.domain.service import IdentityProviderClient
from folio.util.di.infrastructure.supabase import SupabaseProvider


class MockSupabaseProvider(SupabaseProvider):
    """Mock Supabase provider using an in-memory admin client.

    APP scope so accounts seeded by a test are visible to every request.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_provider(self) -> IdentityProviderClient:
        """Provide mock Supabase admin client."""
        return MockSupabaseAdminClient()
