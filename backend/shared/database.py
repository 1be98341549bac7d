"""
Database client factory for Supabase.

The client always uses the service role key: authorization is enforced by
the API layer, not by Row Level Security.
"""

import logging

from supabase import create_client, Client

from .config import Settings

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client with service role (bypasses RLS).

    Args:
        settings: Application settings carrying the Supabase URL and key

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If the Supabase configuration is incomplete
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    logger.info("Connecting to Supabase at %s", settings.supabase_url)
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )
