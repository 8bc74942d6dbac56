"""
Request validators for the shop use cases.

Each rule model mirrors one request DTO. Field validators raise
PydanticCustomError so the reported message is exactly the one the
API documents, without pydantic's "Value error, " prefix.
"""

from decimal import Decimal

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from storefront.application.pipeline import RequestValidator
from storefront.domain.shop.entities import (
    PRICE_PRECISION,
    PRICE_SCALE,
    PRODUCT_DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    USER_ID_MAX_LENGTH,
)
from storefront.domain.shop.errors import CartErrors, ProductErrors

MAX_PAGE_SIZE = 100


def _fail(error_type: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(error_type, message)


def _check_positive(value: int | Decimal, error_type: str, message: str):
    if value <= 0:
        raise _fail(error_type, message)
    return value


def _fits_price_precision(value: Decimal) -> bool:
    decimals = max(-value.normalize().as_tuple().exponent, 0)
    integer_digits = value.adjusted() + 1
    return decimals <= PRICE_SCALE and integer_digits <= PRICE_PRECISION - PRICE_SCALE


def _check_user_id(value: str) -> str:
    if not value.strip():
        raise _fail("not_empty", CartErrors.EMPTY_USER_ID.description)
    if len(value) > USER_ID_MAX_LENGTH:
        raise _fail(
            "max_length",
            f"User ID must be at most {USER_ID_MAX_LENGTH} characters.",
        )
    return value


class ProductRules(BaseModel):
    """Rules shared by product create and update."""

    name: str
    description: str = ""
    price: Decimal

    @field_validator("name")
    @classmethod
    def name_present_and_short(cls, value: str) -> str:
        if not value.strip() or len(value) > PRODUCT_NAME_MAX_LENGTH:
            raise _fail("invalid_name", ProductErrors.INVALID_NAME.description)
        return value

    @field_validator("description")
    @classmethod
    def description_short(cls, value: str) -> str:
        if len(value) > PRODUCT_DESCRIPTION_MAX_LENGTH:
            raise _fail(
                "invalid_description", ProductErrors.INVALID_DESCRIPTION.description
            )
        return value

    @field_validator("price")
    @classmethod
    def price_positive_and_storable(cls, value: Decimal) -> Decimal:
        _check_positive(value, "invalid_price", ProductErrors.INVALID_PRICE.description)
        if not _fits_price_precision(value):
            raise _fail(
                "invalid_price_precision",
                ProductErrors.INVALID_PRICE_PRECISION.description,
            )
        return value


class CreateProductRules(ProductRules):
    pass


class UpdateProductRules(ProductRules):
    id: int

    @field_validator("id")
    @classmethod
    def id_positive(cls, value: int) -> int:
        return _check_positive(
            value, "invalid_id", "Product ID must be greater than zero."
        )


class GetProductsRules(BaseModel):
    page: int
    page_size: int

    @field_validator("page")
    @classmethod
    def page_from_one(cls, value: int) -> int:
        return _check_positive(
            value, "invalid_page", "Page must be greater than or equal to 1."
        )

    @field_validator("page_size")
    @classmethod
    def page_size_in_range(cls, value: int) -> int:
        if not 1 <= value <= MAX_PAGE_SIZE:
            raise _fail(
                "invalid_page_size",
                f"Page size must be between 1 and {MAX_PAGE_SIZE}.",
            )
        return value


class CartLineRules(BaseModel):
    """Rules for requests addressing one product line of a cart."""

    user_id: str
    product_id: int

    @field_validator("user_id")
    @classmethod
    def user_id_present(cls, value: str) -> str:
        return _check_user_id(value)

    @field_validator("product_id")
    @classmethod
    def product_id_positive(cls, value: int) -> int:
        return _check_positive(
            value, "invalid_product_id", "Product ID must be greater than zero."
        )


class AddItemToCartRules(CartLineRules):
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_positive(cls, value: int) -> int:
        return _check_positive(
            value, "invalid_quantity", CartErrors.INVALID_QUANTITY.description
        )


class RemoveItemFromCartRules(CartLineRules):
    pass


class ClearCartRules(BaseModel):
    user_id: str

    @field_validator("user_id")
    @classmethod
    def user_id_present(cls, value: str) -> str:
        return _check_user_id(value)


create_product_validator = RequestValidator(CreateProductRules)
update_product_validator = RequestValidator(UpdateProductRules)
get_products_validator = RequestValidator(GetProductsRules)
add_item_to_cart_validator = RequestValidator(AddItemToCartRules)
remove_item_from_cart_validator = RequestValidator(RemoveItemFromCartRules)
clear_cart_validator = RequestValidator(ClearCartRules)
