"""
Store provider selection.

A provider opens a StorePort for each request and owns whatever the
backend needs across requests (an engine, or the in-memory data).
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from sqlalchemy.ext.asyncio import create_async_engine

from storefront.core.config import Settings
from storefront.domain.shop.ports import StorePort
from storefront.infrastructure.shop.memory_store import InMemoryStoreProvider
from storefront.infrastructure.shop.sql_store import SqlAlchemyStoreProvider


class StoreProvider(Protocol):
    def open(self) -> AbstractAsyncContextManager[StorePort]:
        ...

    async def initialize(self, create_schema: bool, seed: bool) -> None:
        ...

    async def close(self) -> None:
        ...


def build_store_provider(settings: Settings) -> StoreProvider:
    """Build the provider for the configured storage backend."""
    if settings.storage_backend == "memory":
        return InMemoryStoreProvider()

    schema = settings.db_schema or None
    execution_options = {"schema_translate_map": {None: schema}} if schema else {}
    engine = create_async_engine(
        settings.get_database_url(),
        pool_pre_ping=True,
        execution_options=execution_options,
    )
    return SqlAlchemyStoreProvider(engine, schema=schema)
