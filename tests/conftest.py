"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set env before any app imports so Settings validates
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest

from src.classroom.core.config import get_settings
from tests.helpers import FakeRepositoryClient

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- GitHub Fixtures (shared) ---


@pytest.fixture
def fake_client() -> FakeRepositoryClient:
    """A RepositoryClient answering "non-empty template" for every repository.

    Tweak `empty`, `template` or `error` per test; calls are counted.
    """
    return FakeRepositoryClient()
