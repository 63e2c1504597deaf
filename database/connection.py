"""
Store connection module - opens and closes the remote store client.

All seeding runs should use get_store() so the shared HTTP client is
closed when the run ends, whether it succeeds or aborts.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx

from database.store import AppwriteStore
from shared.config import StoreConfig


@asynccontextmanager
async def get_store(
    config: StoreConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncGenerator[AppwriteStore, None]:
    """
    Async context manager for an open store.

    Usage:
        async with get_store(config) as store:
            docs = await store.list_documents(config.database_id, collection_id)

    Yields:
        AppwriteStore: Store with an open HTTP client
    """
    store = AppwriteStore(config, transport=transport)
    async with store:
        yield store
