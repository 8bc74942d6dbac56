"""
FastAPI router for the product catalog.

All routes send a request through the mediator. No business logic here.
Rule checks happen in the validation pipeline; error mapping is done
by the central error mapper.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.application.pipeline import Mediator
from storefront.application.shop.dtos import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    CreateProductCommand,
    DeleteProductCommand,
    GetProductByIdQuery,
    GetProductsQuery,
    UpdateProductCommand,
)
from storefront.interfaces.shop.dependencies import get_mediator
from storefront.interfaces.shop.responses import respond
from storefront.interfaces.shop.schemas import (
    CreateProductRequest,
    ErrorResponse,
    ProductCreatedResponse,
    ProductPageResponse,
    ProductResponse,
    ProductUpdatedResponse,
    UpdateProductRequest,
)

router = APIRouter(prefix="/api/products", tags=["Products"])

VALIDATION_ERROR = {400: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_ERROR,
    summary="Create a product",
)
async def create_product(
    request: CreateProductRequest,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Create a product and return it with its new id."""
    result = await mediator.send(
        CreateProductCommand(
            name=request.name,
            description=request.description,
            price=request.price,
        )
    )
    response = respond(result, ProductCreatedResponse, status.HTTP_201_CREATED)
    if response.status_code == status.HTTP_201_CREATED:
        response.headers["Location"] = f"{router.prefix}/{result.value.id}"
    return response


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses=NOT_FOUND,
    summary="Get a product by id",
)
async def get_product_by_id(
    product_id: int,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(GetProductByIdQuery(id=product_id))
    return respond(result, ProductResponse)


@router.get(
    "",
    response_model=ProductPageResponse,
    responses=VALIDATION_ERROR,
    summary="List products",
    description="Page through the catalog ordered by id.",
)
async def get_products(
    page: int = Query(DEFAULT_PAGE),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(GetProductsQuery(page=page, page_size=page_size))
    return respond(result, ProductPageResponse)


@router.put(
    "/{product_id}",
    response_model=ProductUpdatedResponse,
    responses={**VALIDATION_ERROR, **NOT_FOUND},
    summary="Update a product",
)
async def update_product(
    product_id: int,
    request: UpdateProductRequest,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Replace a product's name, description and price."""
    result = await mediator.send(
        UpdateProductCommand(
            id=product_id,
            name=request.name,
            description=request.description,
            price=request.price,
        )
    )
    return respond(result, ProductUpdatedResponse)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a product",
)
async def delete_product(
    product_id: int,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(DeleteProductCommand(id=product_id))
    return respond(result, status_code=status.HTTP_204_NO_CONTENT)
