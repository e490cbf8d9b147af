"""
Supabase Client

Singleton client for Supabase operations.
"""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, create_client

from api.config import get_settings

logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """Error initializing Supabase client."""
    pass


@lru_cache()
def get_supabase_client() -> Client:
    """
    Get the Supabase client instance (singleton).

    Uses the service role key when present so inventory edits are not
    blocked by row-level security, otherwise the anon key.
    """
    settings = get_settings()

    if not settings.supabase_enabled:
        raise SupabaseClientError(
            "Supabase not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY."
        )

    client = create_client(
        settings.supabase_url,
        settings.supabase_service_role_key or settings.supabase_anon_key,
    )

    logger.info("Supabase client initialized")
    return client


def get_supabase_client_optional() -> Optional[Client]:
    """
    Get Supabase client if configured, None otherwise.

    Lets the API fall back to the in-memory store in development.
    """
    settings = get_settings()

    if not settings.supabase_enabled:
        return None

    try:
        return get_supabase_client()
    except SupabaseClientError:
        return None
