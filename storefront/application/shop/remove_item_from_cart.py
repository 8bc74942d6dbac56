"""
Use case: Remove a product line from a user's cart.

Input: RemoveItemFromCartCommand (user_id, product_id)
Output: CartResult
Side effects: Deletes the cart line, bumps the cart's updated_at.
Failure cases: Cart.NotFound, Cart.ItemNotFound.
"""

import logging

from storefront.application.shop.dtos import CartResult, RemoveItemFromCartCommand
from storefront.application.shop.mappers import to_cart_result
from storefront.domain.shop.entities import utc_now
from storefront.domain.shop.errors import CartErrors
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success

logger = logging.getLogger(__name__)


class RemoveItemFromCartUseCase:
    """Removes one product line, whatever its quantity."""

    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, command: RemoveItemFromCartCommand) -> Result[CartResult]:
        """Run the remove item use case.

        Returns:
            Success with the remaining cart, Cart.NotFound when the user
            has no cart, or Cart.ItemNotFound when the product is not in it.
        """
        cart = await self._store.carts.get_by_user(command.user_id)
        if cart is None:
            return CartErrors.NOT_FOUND

        item = cart.find_item(command.product_id)
        if item is None:
            return CartErrors.ITEM_NOT_FOUND

        cart.items.remove(item)
        cart.updated_at = utc_now()
        await self._store.save_changes()

        logger.info(
            "Removed product_id=%d from cart user_id=%s",
            command.product_id,
            command.user_id,
        )
        return Success(to_cart_result(cart))
