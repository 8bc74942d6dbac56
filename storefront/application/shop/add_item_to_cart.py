"""
Use case: Add a product to a user's cart.

Input: AddItemToCartCommand (user_id, product_id, quantity)
Output: CartResult
Side effects: Creates the cart on first use; inserts or increments a cart line.
Failure cases: Product.NotFound (propagated from GetProductById).
"""

import logging

from storefront.application.pipeline import Mediator
from storefront.application.shop.dtos import (
    AddItemToCartCommand,
    CartResult,
    GetProductByIdQuery,
    ProductResult,
)
from storefront.application.shop.mappers import to_cart_result
from storefront.domain.shop.entities import Cart, CartItem, utc_now
from storefront.domain.shop.ports import StorePort
from storefront.shared.result import Error, Result, Success

logger = logging.getLogger(__name__)


class AddItemToCartUseCase:
    """Adds a product line to a cart, merging with an existing line.

    The product is resolved by sending GetProductByIdQuery through the
    mediator, so the catalog lookup goes through the same pipeline as
    any other request.
    """

    def __init__(self, sender: Mediator, store: StorePort) -> None:
        self._sender = sender
        self._store = store

    async def execute(self, command: AddItemToCartCommand) -> Result[CartResult]:
        """Run the add item use case.

        Args:
            command: Cart owner, product and quantity to add.

        Returns:
            Success with the whole cart, or the product lookup's error.
        """
        product_result = await self._sender.send(GetProductByIdQuery(id=command.product_id))
        if isinstance(product_result, Error):
            return product_result

        cart = await self._get_or_create_cart(command.user_id)
        self._add_line(cart, command, product_result.value)
        cart.updated_at = utc_now()

        await self._store.save_changes()

        logger.info(
            "Added product_id=%d x%d to cart user_id=%s",
            command.product_id,
            command.quantity,
            command.user_id,
        )
        return Success(to_cart_result(cart))

    async def _get_or_create_cart(self, user_id: str) -> Cart:
        cart = await self._store.carts.get_by_user(user_id)
        if cart is None:
            now = utc_now()
            cart = Cart(user_id=user_id, created_at=now, updated_at=now)
            await self._store.carts.add(cart)
        return cart

    @staticmethod
    def _add_line(cart: Cart, command: AddItemToCartCommand, product: ProductResult) -> None:
        existing = cart.find_item(command.product_id)
        if existing is not None:
            # Price and name stay as first added; only the quantity grows.
            existing.quantity += command.quantity
            return

        cart.items.append(
            CartItem(
                user_id=cart.user_id,
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=command.quantity,
            )
        )
