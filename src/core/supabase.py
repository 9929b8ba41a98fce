"""Supabase client factory and query execution helpers."""

import asyncio
import logging
from functools import lru_cache
from typing import Any

import httpx
from postgrest.exceptions import APIError as PostgrestError
from supabase import Client, create_client
from supabase.lib.client_options import SyncClientOptions

from src.core.config import get_settings
from src.core.result import NO_ROWS_CODES, Err, Ok, Result, StoreError, StoreErrorKind

logger = logging.getLogger(__name__)


@lru_cache
def get_supabase_client() -> Client:
    """Get the cached Supabase client for database operations.

    The client is created once per process and handed to services through
    FastAPI dependencies (see ``src.api.deps``). Services never reach for it
    on their own, so tests can substitute any object with the same
    query-builder surface.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    options = SyncClientOptions(
        postgrest_client_timeout=settings.store_timeout_seconds,
        auto_refresh_token=False,
        persist_session=False,
    )
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=options,
    )


async def execute_query(query: Any) -> Result[Any]:
    """Execute a prepared PostgREST query and normalize the outcome.

    The blocking ``execute()`` runs in a worker thread so independent
    queries issued with ``asyncio.gather`` overlap.

    Args:
        query: A query builder from ``client.table(...)`` with filters applied.

    Returns:
        Result: ``Ok(response.data)`` or ``Err(StoreError)``. The error carries
        the store's code, message and details unchanged.
    """
    try:
        response = await asyncio.to_thread(query.execute)
    except PostgrestError as e:
        if e.code in NO_ROWS_CODES:
            return Err(StoreError.not_found(e.message or "No rows found"))
        logger.debug("Store query failed: %s - %s", e.code, e.message)
        return Err(
            StoreError(
                kind=StoreErrorKind.UPSTREAM,
                message=e.message or str(e),
                code=e.code,
                details=e.details,
            )
        )
    except httpx.TimeoutException as e:
        logger.debug("Store query timed out: %s", e)
        return Err(StoreError(kind=StoreErrorKind.TIMEOUT, message=str(e) or "Store request timed out"))
    except httpx.HTTPError as e:
        logger.debug("Store transport error: %s", e)
        return Err(StoreError(kind=StoreErrorKind.UPSTREAM, message=str(e)))

    # maybe_single() yields no response object at all when nothing matched
    return Ok(response.data if response is not None else None)


def single_row(result: Result[Any], entity: str) -> Result[dict[str, Any]]:
    """Narrow a query result to exactly one row.

    Args:
        result: Result of a lookup or write query.
        entity: Entity name used in the not-found message.

    Returns:
        Result: ``Ok(row)``, ``Err(not_found)`` when no row came back, or the
        original error.
    """
    if isinstance(result, Err):
        return result

    data = result.data
    if isinstance(data, list):
        data = data[0] if data else None
    if not data:
        return Err(StoreError.not_found(f"{entity} not found"))
    return Ok(data)


def row_list(result: Result[Any]) -> Result[list[dict[str, Any]]]:
    """Normalize a multi-row result so ``Ok`` always carries a list."""
    if isinstance(result, Err):
        return result
    return Ok(list(result.data or []))


async def check_database_connection(client: Client | None = None) -> dict[str, Any]:
    """Check if database connection is healthy.

    Performs a simple query to verify database connectivity.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = client or get_supabase_client()
        client.table("users").select("id").limit(1).execute()
        return {"healthy": True}
    except Exception as e:
        return {"healthy": False, "error": str(e)}
