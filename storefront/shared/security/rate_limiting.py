"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every endpoint.
Limits are keyed by remote address. The check runs as an app-wide
dependency on the matched route, so it does not depend on how the
router nests included routes.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from storefront.core.config import Settings
from storefront.shared.errors.handlers import error_response

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter from the configured default limit."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def enforce_rate_limit(request: Request) -> None:
    """Count the request against the app limiter's default limits.

    Raises:
        RateLimitExceeded: When the client is over its limit.
    """
    limiter: Limiter = request.app.state.limiter
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error body.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response naming the limit that was hit.
    """
    return error_response(
        HTTP_429, "Too Many Requests", f"Rate limit exceeded: {exc.detail}"
    )
