"""
Shop bounded context: domain layer.

Covers the product catalog and per-user shopping carts.
"""
