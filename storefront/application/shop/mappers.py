"""Entity -> DTO mapping shared by the cart use cases."""

from storefront.application.shop.dtos import CartItemResult, CartResult
from storefront.domain.shop.entities import Cart


def to_cart_result(cart: Cart) -> CartResult:
    """Build the cart view with per-line and overall totals."""
    return CartResult(
        user_id=cart.user_id,
        items=[
            CartItemResult(
                product_id=item.product_id,
                product_name=item.product_name,
                unit_price=item.unit_price,
                quantity=item.quantity,
                total_price=item.total_price,
            )
            for item in cart.items
        ],
        total_amount=cart.total_amount,
        total_items=cart.total_items,
        created_at=cart.created_at,
        updated_at=cart.updated_at,
    )
