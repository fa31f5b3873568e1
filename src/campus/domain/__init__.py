"""
Domain layer - business logic and rules.

This package contains:
- Services: Base service implementing the shared record workflow
- Exceptions: Domain-specific exceptions (not found, validation failed)
"""
