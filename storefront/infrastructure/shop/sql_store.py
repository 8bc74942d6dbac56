"""
Adapter: SQLAlchemy store.

Implements StorePort over an AsyncSession. One session, and therefore
one transaction, per HTTP request; save_changes() commits it and a
session closed without commit is rolled back.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.schema import CreateSchema

from storefront.domain.shop.entities import Cart, Product
from storefront.domain.shop.ports import CartRepository, ProductRepository, StorePort
from storefront.infrastructure.shop.orm import (
    MAX_ID,
    metadata,
    products_table,
    start_mappers,
)
from storefront.infrastructure.shop.seed import seed_sample_products

logger = logging.getLogger(__name__)


class SqlProductRepository(ProductRepository):
    """Products table access through the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        # The driver rejects ids the integer column cannot hold.
        if not 0 < product_id <= MAX_ID:
            return None
        return await self._session.get(Product, product_id)

    async def add(self, product: Product) -> None:
        self._session.add(product)

    async def remove(self, product: Product) -> None:
        await self._session.delete(product)

    async def list_page(self, skip: int, take: int) -> list[Product]:
        if skip >= MAX_ID:
            return []
        result = await self._session.execute(
            select(Product).order_by(products_table.c.id).offset(skip).limit(take)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        total = await self._session.scalar(
            select(func.count()).select_from(products_table)
        )
        return total or 0


class SqlCartRepository(CartRepository):
    """Carts and cart_items access; items load with their cart."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: str) -> Optional[Cart]:
        return await self._session.get(Cart, user_id)

    async def add(self, cart: Cart) -> None:
        self._session.add(cart)


class SqlAlchemyStore(StorePort):
    """Unit of work bound to a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.products = SqlProductRepository(session)
        self.carts = SqlCartRepository(session)

    async def save_changes(self) -> None:
        await self._session.commit()


class SqlAlchemyStoreProvider:
    """Hands out a SqlAlchemyStore per request from a shared engine."""

    def __init__(self, engine: AsyncEngine, schema: Optional[str] = None) -> None:
        start_mappers()
        self._engine = engine
        self._schema = schema
        self._session_factory = async_sessionmaker(engine, expire_on_commit=False)

    @asynccontextmanager
    async def open(self) -> AsyncIterator[StorePort]:
        async with self._session_factory() as session:
            yield SqlAlchemyStore(session)

    async def initialize(self, create_schema: bool, seed: bool) -> None:
        """Create missing tables and seed the sample catalog, as configured."""
        if create_schema:
            async with self._engine.begin() as conn:
                if self._schema:
                    await conn.execute(CreateSchema(self._schema, if_not_exists=True))
                await conn.run_sync(metadata.create_all)
            logger.info("Shop tables ensured (schema=%s)", self._schema or "default")

        if seed:
            async with self.open() as store:
                await seed_sample_products(store)

    async def close(self) -> None:
        await self._engine.dispose()
