"""
FastAPI router for shopping carts.

All routes send a request through the mediator. No business logic here.
"""

from fastapi import APIRouter, Depends, Response, status

from storefront.application.pipeline import Mediator
from storefront.application.shop.dtos import (
    AddItemToCartCommand,
    ClearCartCommand,
    GetCartQuery,
    RemoveItemFromCartCommand,
)
from storefront.interfaces.shop.dependencies import get_mediator
from storefront.interfaces.shop.responses import respond
from storefront.interfaces.shop.schemas import (
    AddItemToCartRequest,
    CartDetailResponse,
    CartResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/api/cart", tags=["Shopping Cart"])

ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.post(
    "/{user_id}/items",
    response_model=CartResponse,
    responses=ERRORS,
    summary="Add an item to a cart",
    description="Creates the cart on first use. Adding a product already "
    "in the cart increases its quantity.",
)
async def add_item_to_cart(
    user_id: str,
    request: AddItemToCartRequest,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(
        AddItemToCartCommand(
            user_id=user_id,
            product_id=request.product_id,
            quantity=request.quantity,
        )
    )
    return respond(result, CartResponse)


@router.get(
    "/{user_id}",
    response_model=CartDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a cart",
)
async def get_cart(
    user_id: str,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(GetCartQuery(user_id=user_id))
    return respond(result, CartDetailResponse)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERRORS,
    summary="Clear a cart",
    description="Removes every item. The cart itself remains.",
)
async def clear_cart(
    user_id: str,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(ClearCartCommand(user_id=user_id))
    return respond(result, status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}/items/{product_id}",
    response_model=CartResponse,
    responses=ERRORS,
    summary="Remove an item from a cart",
)
async def remove_item_from_cart(
    user_id: str,
    product_id: int,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(
        RemoveItemFromCartCommand(user_id=user_id, product_id=product_id)
    )
    return respond(result, CartResponse)
