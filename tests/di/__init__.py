"""Mock wirings and the test container."""

from .container import build_test_container
from .persistence import MockPersistenceProvider
from .supabase import MockSupabaseProvider

__all__ = [
    "MockPersistenceProvider",
    "MockSupabaseProvider",
    "build_test_container",
]
