"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from campus.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Logs the configured document store on startup. Repositories are created
    per request by the infrastructure factory, so there is nothing to open
    or close here.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()

    logger.info(" Starting campus backend...")
    logger.info(f"Application version: {app.version}")
    logger.info(f"Document store provider: {settings.infrastructure_provider}")

    yield

    logger.info(" Shutting down campus backend...")
