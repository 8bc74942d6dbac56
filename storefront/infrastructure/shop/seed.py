"""Sample catalog inserted on startup when the products table is empty."""

import logging
from datetime import timedelta
from decimal import Decimal

from storefront.domain.shop.entities import Product, utc_now
from storefront.domain.shop.ports import StorePort

logger = logging.getLogger(__name__)

# (name, description, price, age in days)
SAMPLE_PRODUCTS = [
    ("Sample Product 1", "A sample product", Decimal("19.99"), 5),
    ("Sample Product 2", "Another sample product", Decimal("29.99"), 3),
    ("Sample Product 3", "Yet another sample product", Decimal("39.99"), 1),
]


async def seed_sample_products(store: StorePort) -> int:
    """Insert the sample products if the catalog is empty.

    Returns:
        Number of products inserted.
    """
    if await store.products.count() > 0:
        return 0

    now = utc_now()
    for name, description, price, age_days in SAMPLE_PRODUCTS:
        created = now - timedelta(days=age_days)
        await store.products.add(
            Product(
                name=name,
                description=description,
                price=price,
                created_at=created,
                updated_at=created,
            )
        )
    await store.save_changes()

    logger.info("Seeded %d sample products", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
