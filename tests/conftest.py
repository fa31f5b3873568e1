"""Global pytest configuration and fixtures for all tests."""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Settings are read once at import time, so the test environment must be in
# place before any campus module is imported by a test module.
_STORE_DIR = tempfile.mkdtemp(prefix="campus-tests-")

TEST_ENV_VARS = {
    "INFRASTRUCTURE_PROVIDER": "local",
    "INFRASTRUCTURE_BASE_DIR": _STORE_DIR,
    "ENABLE_DOCS": "false",
    "LOG_LEVEL": "WARNING",
}

for _key, _value in TEST_ENV_VARS.items():
    os.environ[_key] = _value


@pytest.fixture(scope="session", autouse=True)
def cleanup_store_dir():
    """Remove the session-wide local store once all tests ran."""
    yield
    shutil.rmtree(_STORE_DIR, ignore_errors=True)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for a test's local document store."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)
