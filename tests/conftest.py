"""Shared test fixtures for NeuroLearn tests.

This module provides common fixtures used across all test modules:
- Database isolation with temporary files
- A storage backend that always fails (for best-effort persistence paths)
- Standard test user and quiz data

Usage:
    def test_something(sqlite_backend):
        # sqlite_backend writes to a temporary file removed after the test
        ...
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from neurolearn.config import DEFAULT_CONFIG
from neurolearn.errors import PersistenceError
from neurolearn.storage.sqlite import SQLiteBackend


# ─────────────────────────────────────────────────────────────────────────────
# Path Constants
# ─────────────────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).parent.parent


# ─────────────────────────────────────────────────────────────────────────────
# Database Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_db() -> Generator[Path, None, None]:
    """Create a temporary database file for testing.

    The database file is automatically deleted after the test completes.

    Yields:
        Path to the temporary database file
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    yield db_path

    # Cleanup
    if db_path.exists():
        os.unlink(db_path)


@pytest.fixture
def sqlite_backend(temp_db: Path) -> SQLiteBackend:
    """SQLite backend on the temporary database."""
    return SQLiteBackend(temp_db)


class FailingBackend(SQLiteBackend):
    """Backend whose every operation fails like an unreachable store."""

    name = "failing"

    def __init__(self, db_path: Path):
        super().__init__(db_path)
        self.calls: list[str] = []

    def _fail(self, operation: str, user_id: str):
        self.calls.append(operation)
        raise PersistenceError(f"{operation} failed: store unreachable", operation, user_id)

    async def get_preferences(self, user_id):
        self._fail("get_preferences", user_id)

    async def upsert_preferences(self, user_id, row):
        self._fail("upsert_preferences", user_id)

    async def append_energy_log(self, user_id, energy_level, feeling, notes=None):
        self._fail("append_energy_log", user_id)

    async def list_energy_logs(self, user_id, since_days=7):
        self._fail("list_energy_logs", user_id)

    async def append_pomodoro_session(self, user_id, duration_minutes, completed):
        self._fail("append_pomodoro_session", user_id)

    async def append_progress(self, user_id, content_id, format_used, time_spent, completed=False):
        self._fail("append_progress", user_id)

    async def upsert_profile(self, user_id, email=None, username=None, full_name=None):
        self._fail("upsert_profile", user_id)


@pytest.fixture
def failing_backend(temp_db: Path) -> FailingBackend:
    """Backend that raises PersistenceError for every call."""
    return FailingBackend(temp_db)


@pytest.fixture
def test_config() -> dict:
    """Default configuration (no YAML file involved)."""
    return {
        **DEFAULT_CONFIG,
        "pomodoro": {"focus_minutes": 25, "break_minutes": 5, "tick_seconds": 0.01},
    }


# ─────────────────────────────────────────────────────────────────────────────
# User Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_user_id() -> str:
    """Standard test user ID."""
    return "test_user_123"


# ─────────────────────────────────────────────────────────────────────────────
# Quiz Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def calm_visual_responses() -> dict:
    """Low-stimulation, short-burst, visual learner."""
    return {"sensory": "lowStim", "attention": "micro", "intake": "visual"}
