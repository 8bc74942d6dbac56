"""
Use case: Create a catalog product.

Input: CreateProductCommand (name, description, price)
Output: ProductCreatedResult
Side effects: Inserts a product.
Failure cases: None once validation has passed.
"""

import logging

from storefront.application.shop.dtos import CreateProductCommand, ProductCreatedResult
from storefront.domain.shop.entities import Product, utc_now
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Creates a product with a store-assigned id and fresh timestamps."""

    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, command: CreateProductCommand) -> Result[ProductCreatedResult]:
        """Run the create product use case.

        Args:
            command: Validated product fields.

        Returns:
            Success with the created product, including its new id.
        """
        now = utc_now()
        product = Product(
            name=command.name,
            description=command.description,
            price=command.price,
            created_at=now,
            updated_at=now,
        )

        await self._store.products.add(product)
        await self._store.save_changes()

        logger.info("Created product id=%s", product.id)

        return Success(
            ProductCreatedResult(
                id=product.id,
                name=product.name,
                description=product.description,
                price=product.price,
                created_at=product.created_at,
            )
        )
