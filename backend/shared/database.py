"""
Database client factory for Supabase.

Provides the single service-role client used for every backend operation:
token verification against the auth server, privilege lookups, record
reads and writes, and account administration.
"""

import asyncio
import logging
from typing import Optional

from supabase import AsyncClient, AsyncSupabaseException, acreate_client

from .config import get_settings
from .credentials import load_service_credential
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[AsyncClient] = None
_init_lock = asyncio.Lock()


def _resolve_url(project_id: str) -> str:
    settings = get_settings()
    if settings.supabase_url:
        return settings.supabase_url
    return f"https://{project_id}.supabase.co"


async def get_supabase_client() -> AsyncClient:
    """
    Get Supabase client with service role (bypasses RLS).

    The client is built at most once per process. Concurrent first callers
    wait on the same lock, and whoever gets there first builds the client;
    the rest observe it. A failed build is not cached, so the next call
    retries and raises the same configuration error if nothing changed.

    Returns:
        Supabase async client configured with the service-role key

    Raises:
        CredentialError: If the service-account credential is unusable.
        ConfigurationError: If the client rejects the URL or key.
    """
    global _service_client

    if _service_client is not None:
        return _service_client

    async with _init_lock:
        if _service_client is None:
            credential = load_service_credential(get_settings().service_account_json)
            url = _resolve_url(credential.project_id)
            try:
                _service_client = await acreate_client(url, credential.private_key)
            except AsyncSupabaseException as e:
                raise ConfigurationError(
                    f"SUPABASE_URL: cannot create client for {url!r} ({e})",
                    code="INVALID_SUPABASE_URL",
                    details={"url": url},
                )
            logger.info("Supabase client initialised for project %s", credential.project_id)

    return _service_client


async def init_supabase_client() -> None:
    """Initialise the client eagerly (called from the app lifespan)."""
    await get_supabase_client()


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client, _init_lock
    _service_client = None
    _init_lock = asyncio.Lock()
