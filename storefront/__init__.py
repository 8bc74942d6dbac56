"""
Storefront: product catalog and shopping cart API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with a mediated
request pipeline in front of every use case.

Bounded contexts:
    - shop: Product catalog and per-user shopping carts.

Layers:
    - domain: Entities, error catalog, persistence ports (ABCs).
    - application: Mediator, validation pipeline, use cases, DTOs.
    - infrastructure: Store adapters (SQLAlchemy, in-memory).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (result type, errors, security, logging).
"""
