"""
Domain entities for the shop bounded context.

Entities are plain dataclasses with derived totals. They contain no
framework imports and no IO operations; the SQL store maps them onto
tables from the infrastructure layer.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

PRODUCT_NAME_MAX_LENGTH = 100
PRODUCT_DESCRIPTION_MAX_LENGTH = 500
USER_ID_MAX_LENGTH = 50

# Prices: at most 18 significant digits, 2 of them after the point.
PRICE_PRECISION = 18
PRICE_SCALE = 2


@dataclass
class Product:
    """A catalog product.

    The id is assigned by the store when the product is first saved.
    """

    name: str
    price: Decimal
    created_at: datetime
    updated_at: datetime
    description: str = ""
    id: Optional[int] = None


@dataclass
class CartItem:
    """A product line in a cart.

    Identity is (user_id, product_id). Name and unit price are a
    snapshot taken when the product was first added.
    """

    user_id: str
    product_id: int
    product_name: str
    unit_price: Decimal
    quantity: int

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    """A user's shopping cart. Exclusively owns its items."""

    user_id: str
    created_at: datetime
    updated_at: datetime
    items: list[CartItem] = field(default_factory=list)

    @property
    def total_amount(self) -> Decimal:
        return sum((item.total_price for item in self.items), Decimal("0"))

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    def find_item(self, product_id: int) -> Optional[CartItem]:
        """Return the item for a product, or None if it is not in the cart."""
        return next(
            (item for item in self.items if item.product_id == product_id), None
        )


def utc_now() -> datetime:
    """Current time in UTC, used for created/updated timestamps."""
    return datetime.now(timezone.utc)
