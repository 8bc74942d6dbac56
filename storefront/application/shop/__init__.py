"""
Application layer for the shop bounded context.

One module per use case. Use cases coordinate domain entities and
the store port and return a Result instead of raising for expected
failures.
"""
