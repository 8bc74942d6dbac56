"""
Port interfaces (ABCs) for the shop bounded context.

Ports define the persistence contract the use cases require.
Infrastructure adapters implement these interfaces; use cases
never depend on a concrete store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from storefront.domain.shop.entities import Cart, Product


class ProductRepository(ABC):
    """Port for reading and writing catalog products."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return a product by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, product: Product) -> None:
        """Track a new product. Its id is assigned no later than save_changes."""
        raise NotImplementedError

    @abstractmethod
    async def remove(self, product: Product) -> None:
        """Mark a product for deletion."""
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, skip: int, take: int) -> list[Product]:
        """Return up to `take` products after skipping `skip`, ordered by id ascending."""
        raise NotImplementedError

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of products."""
        raise NotImplementedError


class CartRepository(ABC):
    """Port for reading and writing shopping carts with their items."""

    @abstractmethod
    async def get_by_user(self, user_id: str) -> Optional[Cart]:
        """Return the cart for a user with its items loaded, or None."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, cart: Cart) -> None:
        """Track a new cart."""
        raise NotImplementedError


class StorePort(ABC):
    """Unit of work over the shop tables.

    Changes made through the repositories, and in-place mutations of
    the entities they return, become durable on save_changes().
    """

    products: ProductRepository
    carts: CartRepository

    @abstractmethod
    async def save_changes(self) -> None:
        """Persist all pending changes."""
        raise NotImplementedError
