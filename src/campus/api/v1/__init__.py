"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

API_V1_PREFIX: str = "/api/v1"

# Module-specific prefixes
STUDENTS_PREFIX: str = f"{API_V1_PREFIX}/students"
COURSES_PREFIX: str = f"{API_V1_PREFIX}/courses"

__all__ = [
    "API_V1_PREFIX",
    "STUDENTS_PREFIX",
    "COURSES_PREFIX",
]
