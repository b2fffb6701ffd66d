"""Supabase Auth adapter."""

from .admin import MockSupabaseAdminClient, RealSupabaseAdminClient, SupabaseAdminClient

__all__ = [
    "MockSupabaseAdminClient",
    "RealSupabaseAdminClient",
    "SupabaseAdminClient",
]
