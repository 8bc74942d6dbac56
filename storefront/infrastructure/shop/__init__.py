"""
Store adapters for the shop bounded context.

Both adapters implement StorePort: one over SQLAlchemy (Postgres),
one held in process memory.
"""
