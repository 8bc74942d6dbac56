"""
Dependency injection for the shop bounded context.

Opens a store for the request from the provider on app.state and
builds the mediator the routes send their requests through.
"""

from collections.abc import AsyncIterator

from fastapi import Depends, Request

from storefront.application.pipeline import Mediator
from storefront.application.shop.registry import build_mediator
from storefront.domain.shop.ports import StorePort


async def get_store(request: Request) -> AsyncIterator[StorePort]:
    """Yield a store scoped to the current request."""
    provider = request.app.state.store_provider
    async with provider.open() as store:
        yield store


def get_mediator(store: StorePort = Depends(get_store)) -> Mediator:
    """Build the mediator with its use cases bound to the request's store."""
    return build_mediator(store)
