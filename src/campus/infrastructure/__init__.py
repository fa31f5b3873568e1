"""
Infrastructure abstraction layer for the document store.

This module provides repository interfaces and implementations for the
students and courses collections.

Supports multiple providers via factory pattern:
- local: JSON file storage for development
- aws: DynamoDB (PynamoDB)
"""

from campus.infrastructure.factory import InfrastructureFactory

__all__ = ["InfrastructureFactory"]
