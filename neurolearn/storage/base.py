"""
Storage Backend Base Class

Abstract interface every persistence backend (local SQLite, hosted REST)
implements. The engine only ever talks to this interface.

Design Principles:
- Async-first so hosted backends never block the event loop
- Rows in, rows out: backends speak plain dicts in the persisted row
  shape; translation to domain objects lives in the services
- A missing preference row is None, never an exception
- Every backend failure is raised as PersistenceError
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


PREFERENCES_TABLE = "user_preferences"
ENERGY_TABLE = "energy_logs"
POMODORO_TABLE = "pomodoro_sessions"
PROGRESS_TABLE = "user_progress"
PROFILES_TABLE = "profiles"


class StorageBackend(ABC):
    """Persistence operations consumed by the session application."""

    name: str = "base"

    # Preference store

    @abstractmethod
    async def get_preferences(self, user_id: str) -> dict[str, Any] | None:
        """Return the preference row for user_id, or None when absent."""

    @abstractmethod
    async def upsert_preferences(self, user_id: str, row: dict[str, Any]) -> dict[str, Any]:
        """Insert or replace the preference row keyed by user_id; return the stored row."""

    # Energy log store

    @abstractmethod
    async def append_energy_log(
        self,
        user_id: str,
        energy_level: int,
        feeling: str,
        notes: str | None = None,
    ) -> dict[str, Any]:
        """Append an energy check-in and return the stored entry."""

    @abstractmethod
    async def list_energy_logs(self, user_id: str, since_days: int = 7) -> list[dict[str, Any]]:
        """Entries from the last since_days days, most recent first."""

    # Pomodoro session store

    @abstractmethod
    async def append_pomodoro_session(
        self, user_id: str, duration_minutes: int, completed: bool
    ) -> dict[str, Any]:
        """Record a finished (or abandoned) pomodoro cycle."""

    # Progress store

    @abstractmethod
    async def append_progress(
        self,
        user_id: str,
        content_id: str,
        format_used: str,
        time_spent: int,
        completed: bool = False,
    ) -> dict[str, Any]:
        """Record time spent on a piece of lesson content."""

    @abstractmethod
    async def list_progress(self, user_id: str) -> list[dict[str, Any]]:
        """All progress records for user_id, most recent first."""

    # Identity profile store

    @abstractmethod
    async def upsert_profile(
        self,
        user_id: str,
        email: str | None = None,
        username: str | None = None,
        full_name: str | None = None,
    ) -> dict[str, Any]:
        """Mirror identity-provider display data, keyed by user_id."""

    async def close(self) -> None:
        """Release backend resources. Default: nothing to release."""
        return None
