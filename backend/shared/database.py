"""
Supabase client for the record store.

The Supabase record store engine talks to the portal tables with the
service-role key; ownership and role checks happen in the services.
One client is created per process and shared by every store.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

_service_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get the shared service-role Supabase client.

    Args:
        settings: Settings to read the URL and key from; defaults to
            get_settings(). Only consulted when the client is first built.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "The supabase record store needs SUPABASE_URL and "
                "SUPABASE_SERVICE_ROLE_KEY to be set."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """Drop the shared client so the next call builds a new one."""
    global _service_client
    _service_client = None
