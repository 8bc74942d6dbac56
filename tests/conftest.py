"""
Shared fixtures.

The in-memory store backs most tests; SQL store tests run the
SQLAlchemy adapter against a throwaway SQLite file via aiosqlite.
"""

from collections.abc import Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine

from storefront.application.pipeline import Mediator
from storefront.application.shop.registry import build_mediator
from storefront.core.config import Settings
from storefront.infrastructure.shop.memory_store import InMemoryStore
from storefront.infrastructure.shop.seed import seed_sample_products
from storefront.infrastructure.shop.sql_store import SqlAlchemyStoreProvider
from storefront.main import create_app


def make_settings(**overrides) -> Settings:
    """Settings for tests: in-memory store, no rate limiting, seeded catalog."""
    values = {
        "storage_backend": "memory",
        "rate_limit_enabled": False,
        "seed_sample_data": True,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def store() -> InMemoryStore:
    """An empty in-memory store."""
    return InMemoryStore()


@pytest_asyncio.fixture
async def seeded_store(store: InMemoryStore) -> InMemoryStore:
    """An in-memory store holding the three sample products (ids 1-3)."""
    await seed_sample_products(store)
    return store


@pytest.fixture
def mediator(seeded_store: InMemoryStore) -> Mediator:
    return build_mediator(seeded_store)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """HTTP client over an app using the seeded in-memory store."""
    app = create_app(make_settings())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def sql_provider(tmp_path):
    """SQLAlchemy store provider on a fresh SQLite file, tables created and seeded."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    provider = SqlAlchemyStoreProvider(engine)
    await provider.initialize(create_schema=True, seed=True)
    yield provider
    await provider.close()
