"""Providers for components that talk to the outside world.

Importing the production wirings here registers them as subclasses of
their component, which is how ProviderBase.implementation finds them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider
from .supabase import ProdSupabaseProvider, SupabaseProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdSupabaseProvider",
    "SupabaseProvider",
]
