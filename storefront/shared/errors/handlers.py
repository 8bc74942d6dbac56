"""
Centralized error handling for FastAPI.

This is the only place where error kinds become HTTP status codes:

    ErrorKind.VALIDATION -> 400 "Validation Error" (+ field errors)
    ErrorKind.NOT_FOUND  -> 404 "Not Found"
    ErrorKind.FAILURE    -> 500 "An error occurred"

Errors returned by use cases are converted with problem_response().
Exceptions that escape a route are caught by the handlers registered
in register_error_handlers(). Unhandled exceptions are logged with their
traceback; their message is never sent to the client.
"""

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.shared.errors.fields import group_field_errors
from storefront.shared.result import Error, ErrorKind

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "Validation Error"
VALIDATION_DETAIL = "One or more validation errors occurred"
NOT_FOUND_TITLE = "Not Found"
FAILURE_TITLE = "An error occurred"
FAILURE_DETAIL = "An internal server error occurred"

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def error_response(
    status_code: int,
    title: str,
    detail: str,
    errors: Optional[dict[str, list[str]]] = None,
) -> JSONResponse:
    """Build the error body shared by every failure: {title, status, detail, errors?}."""
    body: dict[str, object] = {"title": title, "status": status_code, "detail": detail}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


def problem_response(error: Error) -> JSONResponse:
    """Translate an Error returned by a use case into its HTTP response."""
    status_code = int(STATUS_BY_KIND[error.kind])

    if error.kind is ErrorKind.VALIDATION:
        return error_response(
            status_code, VALIDATION_TITLE, VALIDATION_DETAIL, error.errors or {}
        )
    if error.kind is ErrorKind.NOT_FOUND:
        return error_response(status_code, NOT_FOUND_TITLE, error.description)
    return error_response(status_code, FAILURE_TITLE, FAILURE_DETAIL)


def register_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed request bodies, paths or query strings."""
        return problem_response(Error.validation(group_field_errors(exc.errors())))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Framework-raised HTTP errors (unknown route, wrong method)."""
        phrase = HTTPStatus(exc.status_code).phrase
        detail = exc.detail if isinstance(exc.detail, str) else phrase
        return error_response(exc.status_code, phrase, detail)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unhandled exception: %s", type(exc).__name__)
        return error_response(
            int(HTTPStatus.INTERNAL_SERVER_ERROR), FAILURE_TITLE, FAILURE_DETAIL
        )
