"""
Pydantic schemas for the shop API request/response bodies.

JSON fields are camelCase; Python attributes stay snake_case.
Request schemas only enforce types: business rules (lengths, bounds)
are checked by the validation pipeline so that every rule failure is
reported in one response.
Money is serialized as a JSON number.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class ApiModel(BaseModel):
    """Base for API schemas: camelCase aliases, built from DTO attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ------------------------------------------------------------------
# Products
# ------------------------------------------------------------------


class CreateProductRequest(ApiModel):
    """Request schema for creating a product.

    Attributes:
        name: Display name (1-100 chars).
        description: Optional text (up to 500 chars).
        price: Unit price, greater than zero.
    """

    name: str
    description: str = ""
    price: Decimal


class UpdateProductRequest(CreateProductRequest):
    """Request schema for updating a product. Same fields as creation."""


class ProductCreatedResponse(ApiModel):
    id: int
    name: str
    description: str
    price: Money
    created_at: datetime


class ProductResponse(ApiModel):
    id: int
    name: str
    description: str
    price: Money
    created_at: datetime
    updated_at: datetime


class ProductUpdatedResponse(ApiModel):
    id: int
    name: str
    description: str
    price: Money
    updated_at: datetime


class ProductSummaryResponse(ApiModel):
    id: int
    name: str
    description: str
    price: Money
    created_at: datetime


class ProductPageResponse(ApiModel):
    """One page of the product listing with the catalog size."""

    products: list[ProductSummaryResponse]
    total_count: int
    page: int
    page_size: int


# ------------------------------------------------------------------
# Shopping cart
# ------------------------------------------------------------------


class AddItemToCartRequest(ApiModel):
    """Request schema for adding a product to a cart.

    Attributes:
        product_id: Catalog product id.
        quantity: Units to add, greater than zero.
    """

    product_id: int
    quantity: int


class CartItemResponse(ApiModel):
    product_id: int
    product_name: str
    unit_price: Money
    quantity: int
    total_price: Money


class CartResponse(ApiModel):
    """Cart view returned after adding or removing an item."""

    user_id: str
    items: list[CartItemResponse]
    total_amount: Money
    total_items: int


class CartDetailResponse(CartResponse):
    """Cart view with timestamps, returned by GET."""

    created_at: datetime
    updated_at: datetime


# ------------------------------------------------------------------
# Shared
# ------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error body returned by every error path."""

    title: str
    status: int
    detail: str
    errors: Optional[dict[str, list[str]]] = Field(
        default=None, description="Field name -> messages, validation errors only"
    )
