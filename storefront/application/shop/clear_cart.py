"""
Use case: Empty a user's cart.

Input: ClearCartCommand (user_id)
Output: None
Side effects: Deletes every cart line. The cart itself is kept.
Failure cases: Cart.NotFound.
"""

import logging

from storefront.application.shop.dtos import ClearCartCommand
from storefront.domain.shop.entities import utc_now
from storefront.domain.shop.errors import CartErrors
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Result, Success

logger = logging.getLogger(__name__)


class ClearCartUseCase:
    def __init__(self, store: StorePort) -> None:
        self._store = store

    async def execute(self, command: ClearCartCommand) -> Result[None]:
        cart = await self._store.carts.get_by_user(command.user_id)
        if cart is None:
            return CartErrors.NOT_FOUND

        cart.items.clear()
        cart.updated_at = utc_now()
        await self._store.save_changes()

        logger.info("Cleared cart user_id=%s", command.user_id)
        return Success(None)
