"""Turning a use case Result into an HTTP response."""

from typing import Optional

from fastapi import Response
from fastapi.responses import JSONResponse

from storefront.interfaces.shop.schemas import ApiModel
from storefront.shared.errors.handlers import problem_response
from storefront.shared.result import Error, Result


def respond(
    result: Result,
    schema: Optional[type[ApiModel]] = None,
    status_code: int = 200,
) -> Response:
    """Map a Result to a response.

    Errors go through the central error mapper. A success is serialized
    with `schema`, or answered with an empty body when no schema is given.
    """
    if isinstance(result, Error):
        return problem_response(result)
    if schema is None:
        return Response(status_code=status_code)

    body = schema.model_validate(result.value)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )
