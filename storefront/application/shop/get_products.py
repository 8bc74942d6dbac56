"""
Use case: List catalog products one page at a time.

Input: GetProductsQuery (page, page_size)
Output: ProductPageResult
Side effects: None.
Failure cases: None once validation has passed.
"""

from storefront.application.shop.dtos import (
    GetProductsQuery,
    ProductPageResult,
    ProductSummary,
)
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success


class GetProductsUseCase:
    """Returns one page of products ordered by id, with the catalog size."""

    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, query: GetProductsQuery) -> Result[ProductPageResult]:
        """Run the product listing use case.

        Args:
            query: Page number (from 1) and page size.

        Returns:
            Success with the page slice and the total product count.
        """
        skip = (query.page - 1) * query.page_size

        total_count = await self._store.products.count()
        products = await self._store.products.list_page(skip=skip, take=query.page_size)

        return Success(
            ProductPageResult(
                products=[
                    ProductSummary(
                        id=p.id,
                        name=p.name,
                        description=p.description,
                        price=p.price,
                        created_at=p.created_at,
                    )
                    for p in products
                ],
                total_count=total_count,
                page=query.page,
                page_size=query.page_size,
            )
        )
