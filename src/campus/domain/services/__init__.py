"""
Domain services - business logic and use cases.

Contains the generic record service that the student and course
services specialize.
"""

from campus.domain.services.record_service import RecordService

__all__ = ["RecordService"]
