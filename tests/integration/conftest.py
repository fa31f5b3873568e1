"""Fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from campus.application import create_app
from campus.di import get_infrastructure_factory
from campus.infrastructure import InfrastructureFactory


@pytest.fixture
def app(temp_dir):
    """Create an app whose repositories live in a per-test directory."""
    application = create_app()
    application.dependency_overrides[get_infrastructure_factory] = (
        lambda: InfrastructureFactory(provider="local", base_dir=str(temp_dir))
    )
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)
