"""
Use case: Retrieve a single catalog product.

Input: GetProductByIdQuery (id)
Output: ProductResult
Side effects: None.
Failure cases: Product.NotFound.
"""

from storefront.application.shop.dtos import GetProductByIdQuery, ProductResult
from storefront.domain.shop.errors import ProductErrors
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success


class GetProductByIdUseCase:
    """Looks up a product and maps it to its full view."""

    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, query: GetProductByIdQuery) -> Result[ProductResult]:
        product = await self._store.products.get_by_id(query.id)
        if product is None:
            return ProductErrors.NOT_FOUND

        return Success(
            ProductResult(
                id=product.id,
                name=product.name,
                description=product.description,
                price=product.price,
                created_at=product.created_at,
                updated_at=product.updated_at,
            )
        )
