"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas
and dependency wiring. No business logic belongs here.
Routes send requests through the mediator and map results to responses.
"""
