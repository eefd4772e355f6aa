"""
Supabase client access

Every read and write in the storefront goes through the Supabase client SDK:
- a shared service-role Client for table queries
- a throwaway anon-key Client per sign-in/sign-up (keeps user sessions off the shared client)
- a shared AsyncClient for realtime channels

Author: Uday
Updated: 2025-11-02
"""
import asyncio
import logging
from functools import lru_cache
from typing import Optional

from supabase import AsyncClient, Client, acreate_client, create_client

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# Service-role client (data access)
# ============================================================================

@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """
    FastAPI dependency returning the shared Supabase client

    The service-role key bypasses row-level security, so repositories always
    filter user-owned rows by user_id themselves.

    Usage:
        @router.get("/data")
        def get_data(sb: Client = Depends(get_supabase)):
            ...
    """
    logger.info("Creating Supabase client for %s", settings.SUPABASE_URL)
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


# ============================================================================
# Anon client (auth flows)
# ============================================================================

def get_auth_client() -> Client:
    """
    Fresh anon-key client for a single auth call.

    sign_in_with_password stores the session on the client it is called on,
    so it must never be the shared data client.
    """
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)


# ============================================================================
# Async client (realtime)
# ============================================================================

_async_client: Optional[AsyncClient] = None
_async_client_lock: Optional[asyncio.Lock] = None


async def get_async_supabase() -> AsyncClient:
    """
    Shared AsyncClient used for realtime postgres_changes channels

    Sockets opening at the same time wait on one creation.
    """
    global _async_client, _async_client_lock
    if _async_client is not None:
        return _async_client

    # created lazily so it binds to the running loop
    if _async_client_lock is None:
        _async_client_lock = asyncio.Lock()

    async with _async_client_lock:
        if _async_client is None:
            logger.info("Creating async Supabase client for realtime")
            _async_client = await acreate_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_SERVICE_ROLE_KEY,
            )
    return _async_client


def check_connection(client: Client) -> None:
    """
    Cheap round trip used by /health.

    Raises whatever the client raises when Supabase is unreachable.
    """
    client.table("categories").select("id").limit(1).execute()
