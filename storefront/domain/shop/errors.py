"""
Error catalog for the shop bounded context.

Expected failures are returned from use cases as Error values,
never raised. They are mapped to HTTP responses at the interface layer.
"""

from storefront.shared.result import Error


class ProductErrors:
    """Errors about catalog products."""

    NOT_FOUND = Error.not_found(
        code="Product.NotFound",
        description="Product was not found.",
    )
    INVALID_NAME = Error.validation(
        errors={"name": ["Product name cannot be empty and must be less than 100 characters."]},
        code="Product.InvalidName",
        description="Product name cannot be empty and must be less than 100 characters.",
    )
    INVALID_PRICE = Error.validation(
        errors={"price": ["Product price must be greater than zero."]},
        code="Product.InvalidPrice",
        description="Product price must be greater than zero.",
    )
    INVALID_PRICE_PRECISION = Error.validation(
        errors={"price": ["Product price must have at most 16 digits before and 2 after the decimal point."]},
        code="Product.InvalidPricePrecision",
        description="Product price must have at most 16 digits before and 2 after the decimal point.",
    )
    INVALID_DESCRIPTION = Error.validation(
        errors={"description": ["Product description must be less than 500 characters."]},
        code="Product.InvalidDescription",
        description="Product description must be less than 500 characters.",
    )


class CartErrors:
    """Errors about shopping carts and their items."""

    NOT_FOUND = Error.not_found(
        code="Cart.NotFound",
        description="Cart was not found.",
    )
    ITEM_NOT_FOUND = Error.not_found(
        code="Cart.ItemNotFound",
        description="Item not found in cart.",
    )
    PRODUCT_NOT_FOUND = Error.not_found(
        code="Cart.ProductNotFound",
        description="Product not found. Cannot add to cart.",
    )
    INVALID_QUANTITY = Error.validation(
        errors={"quantity": ["Quantity must be greater than zero."]},
        code="Cart.InvalidQuantity",
        description="Quantity must be greater than zero.",
    )
    EMPTY_USER_ID = Error.validation(
        errors={"userId": ["User ID cannot be empty."]},
        code="Cart.EmptyUserId",
        description="User ID cannot be empty.",
    )
