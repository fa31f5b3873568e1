"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from campus.api.v1.courses.router import router as courses_router
from campus.api.v1.health.router import router as health_router
from campus.api.v1.students.router import router as students_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, public)
    app.include_router(health_router)

    # Versioned API
    app.include_router(students_router)
    app.include_router(courses_router)
