"""
Use case: Delete a catalog product.

Input: DeleteProductCommand (id)
Output: None
Side effects: Removes the product. Cart lines keep their snapshot.
Failure cases: Product.NotFound.
"""

import logging

from storefront.application.shop.dtos import DeleteProductCommand
from storefront.domain.shop.errors import ProductErrors
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Removes a product from the catalog."""

    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, command: DeleteProductCommand) -> Result[None]:
        product = await self._store.products.get_by_id(command.id)
        if product is None:
            return ProductErrors.NOT_FOUND

        await self._store.products.remove(product)
        await self._store.save_changes()

        logger.info("Deleted product id=%s", command.id)
        return Success(None)
