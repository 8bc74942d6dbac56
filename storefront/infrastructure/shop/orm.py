"""
Table definitions and classical (imperative) mapping of the shop entities.

The domain dataclasses stay framework-free; SQLAlchemy instruments them
here when start_mappers() is called. Tables are declared without a schema;
the engine's schema_translate_map places them in the configured schema.
"""

import logging

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)
from sqlalchemy.orm import registry, relationship

from storefront.domain.shop.entities import (
    PRICE_PRECISION,
    PRICE_SCALE,
    PRODUCT_DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    USER_ID_MAX_LENGTH,
    Cart,
    CartItem,
    Product,
)

logger = logging.getLogger(__name__)

# Largest value a Postgres integer column holds.
MAX_ID = 2**31 - 1

metadata = MetaData()
mapper_registry = registry(metadata=metadata)

products_table = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(PRODUCT_NAME_MAX_LENGTH), nullable=False),
    Column("description", String(PRODUCT_DESCRIPTION_MAX_LENGTH), nullable=False),
    Column("price", Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

carts_table = Table(
    "carts",
    metadata,
    Column("user_id", String(USER_ID_MAX_LENGTH), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

cart_items_table = Table(
    "cart_items",
    metadata,
    Column(
        "user_id",
        String(USER_ID_MAX_LENGTH),
        ForeignKey("carts.user_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("product_id", Integer, primary_key=True, autoincrement=False),
    Column("product_name", String(PRODUCT_NAME_MAX_LENGTH), nullable=False),
    Column("unit_price", Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False),
    Column("quantity", Integer, nullable=False),
)

_mapped = False


def start_mappers() -> None:
    """Map the domain dataclasses onto the shop tables. Safe to call twice."""
    global _mapped
    if _mapped:
        return

    mapper_registry.map_imperatively(Product, products_table)
    mapper_registry.map_imperatively(CartItem, cart_items_table)
    mapper_registry.map_imperatively(
        Cart,
        carts_table,
        properties={
            "items": relationship(
                CartItem,
                cascade="all, delete-orphan",
                lazy="selectin",
                order_by=cart_items_table.c.product_id,
            ),
        },
    )
    _mapped = True
    logger.debug("Shop entities mapped to tables: %s", list(metadata.tables))
