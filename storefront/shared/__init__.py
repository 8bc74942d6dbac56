"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Result type for expected failures
- Error handling and error-to-HTTP mapping
- Security middleware
- Rate limiting
- Logging configuration
"""
