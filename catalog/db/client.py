"""
Supabase client bootstrap.

The catalog talks to Supabase with the public anon key only. The client is
stateless: no token refresh, no session persistence, so every request reaches
the database as the `anon` role and is subject to the RLS policies defined in
supabase/migrations.

A single handle is shared by the whole process; use get_supabase_client()
everywhere instead of calling create_client() directly.
"""

import logging
from typing import Optional

from supabase import Client, ClientOptions, create_client

from catalog.config import MissingSupabaseConfigError, settings

logger = logging.getLogger(__name__)

_supabase_client: Optional[Client] = None


def create_supabase_client(
    supabase_url: Optional[str] = None,
    supabase_key: Optional[str] = None
) -> Client:
    """
    Build a new anonymous Supabase client.

    Args:
        supabase_url: Project URL (defaults to settings.SUPABASE_URL)
        supabase_key: Anon key (defaults to settings.SUPABASE_ANON_KEY)

    Returns:
        A Supabase client with token refresh and session persistence disabled.

    Raises:
        MissingSupabaseConfigError: If the URL or the key is empty. Nothing is
            retried and no fallback service is used.
    """
    url = supabase_url if supabase_url is not None else settings.SUPABASE_URL
    key = supabase_key if supabase_key is not None else settings.SUPABASE_ANON_KEY

    if not url or not key:
        # Report presence only, the key must never reach the logs
        logger.error(
            "Supabase environment variables: "
            f"SUPABASE_URL={'exists' if url else 'missing'}, "
            f"SUPABASE_ANON_KEY={'exists' if key else 'missing'}"
        )
        raise MissingSupabaseConfigError()

    options = ClientOptions(
        auto_refresh_token=False,
        persist_session=False,
    )

    client: Client = create_client(
        supabase_url=url,
        supabase_key=key,
        options=options,
    )

    logger.debug("Created anonymous Supabase client (stateless, RLS enforced)")

    return client


def get_supabase_client() -> Client:
    """
    Return the shared Supabase client, creating it on first use.

    Raises:
        MissingSupabaseConfigError: If Supabase is not configured.

    Example:
        >>> client = get_supabase_client()
        >>> result = client.table("catalog_parts").select("*").execute()
    """
    global _supabase_client

    if _supabase_client is None:
        _supabase_client = create_supabase_client()
        logger.info("Supabase client initialized")

    return _supabase_client
