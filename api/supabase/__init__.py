"""
Supabase Integration Module

Database access for the catalog, inventory and quote tables.
"""

from api.supabase.client import (
    SupabaseClientError,
    get_supabase_client,
    get_supabase_client_optional,
)
from api.supabase.repository import SupabaseRepository

__all__ = [
    # Client
    "get_supabase_client",
    "get_supabase_client_optional",
    "SupabaseClientError",
    # Repository
    "SupabaseRepository",
]
