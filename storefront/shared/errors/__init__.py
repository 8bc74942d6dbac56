"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that returned errors and
unhandled exceptions are consistently translated into API responses.
"""
