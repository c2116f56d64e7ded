# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds Settings pointing at a throwaway SQLite database per test
# - Provides a TestClient running the full application lifespan
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# Importing app.main builds the module-level app from the environment

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

TEST_KEY = "test-shared-secret"
TEST_LIMIT = 3


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def database_url(tmp_path):
    """SQLite database file unique to one test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'logs.db'}"


@pytest.fixture
def settings(database_url):
    """Settings isolated from the developer's .env file."""
    return Settings(
        _env_file=None,
        DATABASE_URL=database_url,
        KEY=TEST_KEY,
        LIMIT=TEST_LIMIT,
        DB_TIMEOUT=5.0,
    )


@pytest.fixture
def app(settings):
    """Application built from the test settings."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with startup (schema creation) and shutdown run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_events():
    """Sample log bodies for testing."""
    return [
        {"name": "signup", "data": {"user": "ada", "plan": "free"}},
        {"name": "checkout", "data": {"cart": [1, 2, 3], "total": 42.5}},
        {"name": "heartbeat", "data": {}},
    ]
