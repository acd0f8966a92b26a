"""Supabase client wrapper and query execution with error classification."""

import os
import logging
from typing import Any, Callable, Optional
from supabase import create_client, Client
from supabase.client import ClientOptions
from src.utils.errors import SupabaseError
from src.utils.error_handler import handle_error
from src.utils.logging import get_structured_logger, log_timing

logger = logging.getLogger(__name__)
structured_logger = get_structured_logger(__name__)

# Global client instance (singleton pattern)
_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton."""
    global _client

    if _client is None:
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

        if not url or not key:
            raise SupabaseError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        options = ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        )

        _client = create_client(url, key, options)
        logger.info("Supabase client initialized", extra={"url": url})

    return _client


async def close_supabase_client() -> None:
    """Drop the Supabase client singleton."""
    global _client
    if _client:
        _client = None
        logger.info("Supabase client closed")


class SupabaseClient:
    """Async context manager for Supabase client."""

    def __init__(self):
        self.client: Optional[Client] = None

    async def __aenter__(self) -> Client:
        self.client = get_supabase_client()
        return self.client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(
                "Supabase operation error",
                extra={"error_type": exc_type.__name__}
            )
        return False


async def execute_query(query: Any, operation_context: str) -> Any:
    """
    Execute a PostgREST query builder and return its data.

    Any failure is classified and raised as a ClassifiedError, e.g.

        tags = await execute_query(
            client.table("tags").insert({"name": name}),
            "creating tag",
        )
    """
    with log_timing(operation_context, logger=structured_logger):
        try:
            response = query.execute()
        except Exception as e:
            handle_error(e, operation_context)

    return response.data


async def run_query(build_query: Callable[[Client], Any], operation_context: str) -> Any:
    """
    Build a query against the shared client and execute it.

        brief = await run_query(
            lambda c: c.table("briefs").update({"status": "Review"}).eq("id", brief_id),
            "updating brief",
        )
    """
    async with SupabaseClient() as client:
        return await execute_query(build_query(client), operation_context)
