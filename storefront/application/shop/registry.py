"""
Mediator wiring for the shop use cases.

Registers each request type with its use case and, where the request
carries user input worth checking, its validator. GetProductById,
GetCart and DeleteProduct have no validator; a missing id simply
yields NotFound.
"""

from storefront.application.pipeline import Mediator
from storefront.application.shop.add_item_to_cart import AddItemToCartUseCase
from storefront.application.shop.clear_cart import ClearCartUseCase
from storefront.application.shop.create_product import CreateProductUseCase
from storefront.application.shop.delete_product import DeleteProductUseCase
from storefront.application.shop.dtos import (
    AddItemToCartCommand,
    ClearCartCommand,
    CreateProductCommand,
    DeleteProductCommand,
    GetCartQuery,
    GetProductByIdQuery,
    GetProductsQuery,
    RemoveItemFromCartCommand,
    UpdateProductCommand,
)
from storefront.application.shop.get_cart import GetCartUseCase
from storefront.application.shop.get_product_by_id import GetProductByIdUseCase
from storefront.application.shop.get_products import GetProductsUseCase
from storefront.application.shop.remove_item_from_cart import RemoveItemFromCartUseCase
from storefront.application.shop.update_product import UpdateProductUseCase
from storefront.application.shop.validators import (
    add_item_to_cart_validator,
    clear_cart_validator,
    create_product_validator,
    get_products_validator,
    remove_item_from_cart_validator,
    update_product_validator,
)
from storefront.domain.shop.ports import StorePort


def build_mediator(store: StorePort) -> Mediator:
    """Build a mediator whose use cases all work against `store`."""
    mediator = Mediator()

    # Products
    mediator.register(
        CreateProductCommand,
        lambda _sender: CreateProductUseCase(store),
        create_product_validator,
    )
    mediator.register(GetProductByIdQuery, lambda _sender: GetProductByIdUseCase(store))
    mediator.register(
        GetProductsQuery,
        lambda _sender: GetProductsUseCase(store),
        get_products_validator,
    )
    mediator.register(
        UpdateProductCommand,
        lambda _sender: UpdateProductUseCase(store),
        update_product_validator,
    )
    mediator.register(DeleteProductCommand, lambda _sender: DeleteProductUseCase(store))

    # Shopping cart
    mediator.register(
        AddItemToCartCommand,
        lambda sender: AddItemToCartUseCase(sender, store),
        add_item_to_cart_validator,
    )
    mediator.register(GetCartQuery, lambda _sender: GetCartUseCase(store))
    mediator.register(
        RemoveItemFromCartCommand,
        lambda _sender: RemoveItemFromCartUseCase(store),
        remove_item_from_cart_validator,
    )
    mediator.register(
        ClearCartCommand,
        lambda _sender: ClearCartUseCase(store),
        clear_cart_validator,
    )

    return mediator
