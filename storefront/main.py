"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (products, shopping cart, health)
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The store provider (SQL or in-memory) for the app's lifetime

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from slowapi.errors import RateLimitExceeded

from storefront.core.config import Settings, settings as default_settings
from storefront.infrastructure.shop.providers import build_store_provider
from storefront.interfaces.health import router as health_router
from storefront.interfaces.shop.cart import router as cart_router
from storefront.interfaces.shop.products import router as products_router
from storefront.shared.errors.handlers import register_error_handlers
from storefront.shared.logging import configure_logging
from storefront.shared.security.headers import SecurityHeadersMiddleware
from storefront.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the store provider, close it on shutdown."""
    app_settings: Settings = app.state.settings
    provider = build_store_provider(app_settings)
    await provider.initialize(
        create_schema=app_settings.create_schema_on_startup,
        seed=app_settings.seed_sample_data,
    )
    app.state.store_provider = provider
    logger.info("Store ready (backend=%s)", app_settings.storage_backend)

    yield

    await provider.close()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )
    app.state.settings = app_settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(app_settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(cart_router)

    return app


app = create_app()
