"""
Integration test fixtures for NeuroLearn.

Provides fixtures specific to integration testing:
- A dashboard app wired to an isolated SQLite database
- FastAPI test clients (lifespan events run inside the `with` block)
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from neurolearn.dashboard.backend.main import create_app
from neurolearn.storage.sqlite import SQLiteBackend


# ─────────────────────────────────────────────────────────────────────────────
# Dashboard API Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def dashboard_backend(temp_db: Path) -> SQLiteBackend:
    """Storage behind the dashboard app."""
    return SQLiteBackend(temp_db)


@pytest.fixture
def dashboard_client(dashboard_backend, test_config) -> Generator[TestClient, None, None]:
    """
    Test client for the dashboard API.

    Yields:
        TestClient with the app started (session registry available)
    """
    app = create_app(backend=dashboard_backend, config=test_config)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def failing_client(failing_backend, test_config) -> Generator[TestClient, None, None]:
    """Test client whose store rejects every write."""
    app = create_app(backend=failing_backend, config=test_config)
    with TestClient(app) as client:
        yield client
