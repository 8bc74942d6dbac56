"""
Use case: Update a catalog product.

Input: UpdateProductCommand (id, name, description, price)
Output: ProductUpdatedResult
Side effects: Overwrites the product's fields and updated_at.
Failure cases: Product.NotFound.
"""

import logging

from storefront.application.shop.dtos import ProductUpdatedResult, UpdateProductCommand
from storefront.domain.shop.entities import utc_now
from storefront.domain.shop.errors import ProductErrors
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Replaces a product's mutable fields. Identity and created_at are kept."""

    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, command: UpdateProductCommand) -> Result[ProductUpdatedResult]:
        """Run the update product use case.

        Args:
            command: Product id and the new field values.

        Returns:
            Success with the updated product, or Product.NotFound.
        """
        product = await self._store.products.get_by_id(command.id)
        if product is None:
            return ProductErrors.NOT_FOUND

        product.name = command.name
        product.description = command.description
        product.price = command.price
        product.updated_at = utc_now()

        await self._store.save_changes()

        logger.info("Updated product id=%s", product.id)

        return Success(
            ProductUpdatedResult(
                id=product.id,
                name=product.name,
                description=product.description,
                price=product.price,
                updated_at=product.updated_at,
            )
        )
