"""
Dependency injection container for the campus backend.

This module provides centralized dependency injection using FastAPI's Depends
with typing.Annotated for clean type hints throughout the application.
"""

from typing import Annotated

from fastapi import Depends

from campus.api.v1.courses.services import CourseService
from campus.api.v1.students.services import StudentService
from campus.config import Settings, get_settings
from campus.infrastructure import InfrastructureFactory

# ============================================================================
# Settings Dependencies
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""


# ============================================================================
# Infrastructure Dependencies
# ============================================================================


def get_infrastructure_factory(
    settings: SettingsDep,
) -> InfrastructureFactory:
    """
    Get infrastructure factory from settings.

    Args:
        settings: Application settings (injected)

    Returns:
        Configured infrastructure factory
    """
    return InfrastructureFactory.from_settings(settings)


InfrastructureFactoryDep = Annotated[
    InfrastructureFactory, Depends(get_infrastructure_factory)
]
"""Injected InfrastructureFactory instance."""


# ============================================================================
# Service Dependencies
# ============================================================================


def get_student_service(factory: InfrastructureFactoryDep) -> StudentService:
    """
    Get Student service.

    Args:
        factory: Infrastructure factory (injected)

    Returns:
        Student service backed by the configured repository
    """
    return StudentService(factory.get_student_repository())


StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]
"""Injected StudentService."""


def get_course_service(factory: InfrastructureFactoryDep) -> CourseService:
    """
    Get Course service.

    Args:
        factory: Infrastructure factory (injected)

    Returns:
        Course service backed by the configured repository
    """
    return CourseService(factory.get_course_repository())


CourseServiceDep = Annotated[CourseService, Depends(get_course_service)]
"""Injected CourseService."""
