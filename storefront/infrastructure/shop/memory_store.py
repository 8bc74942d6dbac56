"""
Adapter: in-memory store.

Implements StorePort with plain dicts owned by an InMemoryStore
instance. The instance lives on the application state, so every test
or app gets its own data. Entities are mutated in place, which makes
save_changes() a no-op.
"""

import itertools
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from storefront.domain.shop.entities import Cart, Product
from storefront.domain.shop.ports import CartRepository, ProductRepository, StorePort
from storefront.infrastructure.shop.seed import seed_sample_products


class InMemoryProductRepository(ProductRepository):
    def __init__(self) -> None:
        self._products: dict[int, Product] = {}
        self._ids = itertools.count(1)

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    async def add(self, product: Product) -> None:
        product.id = next(self._ids)
        self._products[product.id] = product

    async def remove(self, product: Product) -> None:
        self._products.pop(product.id, None)

    async def list_page(self, skip: int, take: int) -> list[Product]:
        ordered = sorted(self._products.values(), key=lambda p: p.id)
        return ordered[skip:skip + take]

    async def count(self) -> int:
        return len(self._products)


class InMemoryCartRepository(CartRepository):
    def __init__(self) -> None:
        self._carts: dict[str, Cart] = {}

    async def get_by_user(self, user_id: str) -> Optional[Cart]:
        return self._carts.get(user_id)

    async def add(self, cart: Cart) -> None:
        self._carts[cart.user_id] = cart


class InMemoryStore(StorePort):
    """Process-local store for development and tests."""

    def __init__(self) -> None:
        self.products = InMemoryProductRepository()
        self.carts = InMemoryCartRepository()

    async def save_changes(self) -> None:
        return None


class InMemoryStoreProvider:
    """Hands out the same InMemoryStore to every request."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    @asynccontextmanager
    async def open(self) -> AsyncIterator[StorePort]:
        yield self.store

    async def initialize(self, create_schema: bool, seed: bool) -> None:
        if seed:
            await seed_sample_products(self.store)

    async def close(self) -> None:
        return None
