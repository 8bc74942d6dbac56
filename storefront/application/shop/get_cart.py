"""
Use case: Retrieve a user's cart.

Input: GetCartQuery (user_id)
Output: CartResult
Side effects: None.
Failure cases: Cart.NotFound.
"""

from storefront.application.shop.dtos import CartResult, GetCartQuery
from storefront.application.shop.mappers import to_cart_result
from storefront.domain.shop.errors import CartErrors
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success


class GetCartUseCase:
    """Returns a cart with its items and totals."""

    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, query: GetCartQuery) -> Result[CartResult]:
        cart = await self._store.carts.get_by_user(query.user_id)
        if cart is None:
            return CartErrors.NOT_FOUND
        return Success(to_cart_result(cart))
