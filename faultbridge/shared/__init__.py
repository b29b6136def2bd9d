"""
Shared module package.

Contains cross-cutting concerns used across layers:
- Error handling and mapping to HTTP responses
- Logging configuration
"""
