"""
Data Transfer Objects for the shop application layer.

DTOs carry data between the interface and application layers.
Commands and queries are the request objects sent through the
mediator; results are what the use cases return inside Success.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


# ------------------------------------------------------------------
# Products
# ------------------------------------------------------------------


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product.

    Attributes:
        name: Display name (1-100 chars).
        description: Free text (up to 500 chars).
        price: Unit price, strictly positive.
    """

    name: str
    description: str
    price: Decimal


@dataclass(frozen=True)
class GetProductByIdQuery:
    """Input DTO for fetching a single product."""

    id: int


@dataclass(frozen=True)
class GetProductsQuery:
    """Input DTO for listing products one page at a time.

    Attributes:
        page: 1-based page number.
        page_size: Number of products per page.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input DTO for replacing a product's name, description and price."""

    id: int
    name: str
    description: str
    price: Decimal


@dataclass(frozen=True)
class DeleteProductCommand:
    """Input DTO for deleting a product."""

    id: int


@dataclass(frozen=True)
class ProductCreatedResult:
    """Output DTO returned after a product is created."""

    id: int
    name: str
    description: str
    price: Decimal
    created_at: datetime


@dataclass(frozen=True)
class ProductResult:
    """Output DTO for the full view of a product."""

    id: int
    name: str
    description: str
    price: Decimal
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProductUpdatedResult:
    """Output DTO returned after a product is updated."""

    id: int
    name: str
    description: str
    price: Decimal
    updated_at: datetime


@dataclass(frozen=True)
class ProductSummary:
    """A product as it appears in a listing page."""

    id: int
    name: str
    description: str
    price: Decimal
    created_at: datetime


@dataclass(frozen=True)
class ProductPageResult:
    """Output DTO for one page of the product listing.

    Attributes:
        products: Products on this page, ordered by id.
        total_count: Number of products in the whole catalog.
        page: The requested page.
        page_size: The requested page size.
    """

    products: list[ProductSummary]
    total_count: int
    page: int
    page_size: int


# ------------------------------------------------------------------
# Shopping cart
# ------------------------------------------------------------------


@dataclass(frozen=True)
class AddItemToCartCommand:
    """Input DTO for adding a product to a user's cart.

    Attributes:
        user_id: Owner of the cart (1-50 chars).
        product_id: Catalog product to add.
        quantity: How many to add, strictly positive.
    """

    user_id: str
    product_id: int
    quantity: int


@dataclass(frozen=True)
class GetCartQuery:
    """Input DTO for reading a user's cart."""

    user_id: str


@dataclass(frozen=True)
class RemoveItemFromCartCommand:
    """Input DTO for removing one product line from a cart."""

    user_id: str
    product_id: int


@dataclass(frozen=True)
class ClearCartCommand:
    """Input DTO for emptying a cart."""

    user_id: str


@dataclass(frozen=True)
class CartItemResult:
    """A single cart line in a cart view."""

    product_id: int
    product_name: str
    unit_price: Decimal
    quantity: int
    total_price: Decimal


@dataclass(frozen=True)
class CartResult:
    """Output DTO for a cart with its items and totals."""

    user_id: str
    items: list[CartItemResult]
    total_amount: Decimal
    total_items: int
    created_at: datetime
    updated_at: datetime
