"""
Tool: SQLite Storage Backend
Purpose: Local persistence for preferences, energy logs, pomodoro sessions,
progress and identity profiles

Usage:
    from neurolearn.storage.sqlite import SQLiteBackend

    backend = SQLiteBackend(db_path)
    row = await backend.get_preferences("alice")   # None when absent

Database: data/neurolearn.db
    - user_preferences: One row per user (user_id primary key)
    - energy_logs: Append-only check-ins
    - pomodoro_sessions: Append-only timer cycles
    - user_progress: Append-only lesson progress
    - profiles: Identity mirror (id primary key)

Dependencies:
    - sqlite3 (stdlib)
"""

import logging
import sqlite3
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from neurolearn import DB_PATH
from neurolearn.errors import PersistenceError
from neurolearn.storage.base import (
    ENERGY_TABLE,
    POMODORO_TABLE,
    PREFERENCES_TABLE,
    PROFILES_TABLE,
    PROGRESS_TABLE,
    StorageBackend,
)

logger = logging.getLogger(__name__)


PREFERENCE_COLUMNS = (
    "font_family",
    "text_scale",
    "letter_spacing",
    "line_height",
    "theme",
    "sensory_reduced",
    "focus_mode",
    "updated_at",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLiteBackend(StorageBackend):
    """StorageBackend over a local SQLite file."""

    name = "sqlite"

    def __init__(self, db_path: Path | str | None = None):
        self.db_path = Path(db_path) if db_path else DB_PATH

    def get_connection(self) -> sqlite3.Connection:
        """Get database connection, creating tables if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row

        cursor = conn.cursor()

        cursor.execute(f"""
            CREATE TABLE IF NOT EXISTS {PREFERENCES_TABLE} (
                user_id TEXT PRIMARY KEY,
                font_family TEXT NOT NULL,
                text_scale REAL NOT NULL,
                letter_spacing REAL NOT NULL,
                line_height REAL NOT NULL,
                theme TEXT NOT NULL,
                sensory_reduced INTEGER DEFAULT 0,
                focus_mode INTEGER DEFAULT 0,
                created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                updated_at DATETIME
            )
        """)

        cursor.execute(f"""
            CREATE TABLE IF NOT EXISTS {ENERGY_TABLE} (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                energy_level INTEGER NOT NULL CHECK(energy_level BETWEEN 1 AND 5),
                feeling TEXT,
                notes TEXT,
                created_at DATETIME NOT NULL
            )
        """)

        cursor.execute(f"""
            CREATE TABLE IF NOT EXISTS {POMODORO_TABLE} (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                duration INTEGER NOT NULL,
                completed INTEGER DEFAULT 0,
                created_at DATETIME NOT NULL
            )
        """)

        cursor.execute(f"""
            CREATE TABLE IF NOT EXISTS {PROGRESS_TABLE} (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                content_id TEXT NOT NULL,
                format_used TEXT NOT NULL,
                time_spent INTEGER DEFAULT 0,
                completed INTEGER DEFAULT 0,
                created_at DATETIME NOT NULL
            )
        """)

        cursor.execute(f"""
            CREATE TABLE IF NOT EXISTS {PROFILES_TABLE} (
                id TEXT PRIMARY KEY,
                email TEXT,
                username TEXT,
                full_name TEXT,
                updated_at DATETIME
            )
        """)

        # Indexes
        cursor.execute(
            f"CREATE INDEX IF NOT EXISTS idx_energy_user_time ON {ENERGY_TABLE}(user_id, created_at)"
        )
        cursor.execute(
            f"CREATE INDEX IF NOT EXISTS idx_progress_user ON {PROGRESS_TABLE}(user_id)"
        )

        conn.commit()
        return conn

    def _execute(self, operation: str, user_id: str, sql: str, params: tuple = ()) -> None:
        try:
            conn = self.get_connection()
            try:
                conn.execute(sql, params)
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"{operation} failed: {e}", operation, user_id) from e
        logger.debug(f"{operation} ok for {user_id}")

    def _fetch(
        self, operation: str, user_id: str, sql: str, params: tuple = ()
    ) -> list[dict[str, Any]]:
        try:
            conn = self.get_connection()
            try:
                rows = conn.execute(sql, params).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"{operation} failed: {e}", operation, user_id) from e
        return [dict(row) for row in rows]

    # Preferences

    async def get_preferences(self, user_id: str) -> dict[str, Any] | None:
        rows = self._fetch(
            "get_preferences",
            user_id,
            f"SELECT * FROM {PREFERENCES_TABLE} WHERE user_id = ?",
            (user_id,),
        )
        return rows[0] if rows else None

    async def upsert_preferences(self, user_id: str, row: dict[str, Any]) -> dict[str, Any]:
        values = {column: row.get(column) for column in PREFERENCE_COLUMNS}
        values["updated_at"] = values["updated_at"] or _now()

        columns = ", ".join(("user_id", *PREFERENCE_COLUMNS))
        placeholders = ", ".join("?" * (len(PREFERENCE_COLUMNS) + 1))
        assignments = ", ".join(f"{c} = excluded.{c}" for c in PREFERENCE_COLUMNS)

        self._execute(
            "upsert_preferences",
            user_id,
            f"INSERT INTO {PREFERENCES_TABLE} ({columns}) VALUES ({placeholders}) "
            f"ON CONFLICT(user_id) DO UPDATE SET {assignments}",
            (user_id, *values.values()),
        )
        stored = await self.get_preferences(user_id)
        if stored is None:
            raise PersistenceError("Upserted row not found", "upsert_preferences", user_id)
        return stored

    # Energy logs

    async def append_energy_log(
        self,
        user_id: str,
        energy_level: int,
        feeling: str,
        notes: str | None = None,
    ) -> dict[str, Any]:
        entry = {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "energy_level": energy_level,
            "feeling": feeling,
            "notes": notes,
            "created_at": _now(),
        }
        self._execute(
            "append_energy_log",
            user_id,
            f"INSERT INTO {ENERGY_TABLE} (id, user_id, energy_level, feeling, notes, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            tuple(entry.values()),
        )
        return entry

    async def list_energy_logs(self, user_id: str, since_days: int = 7) -> list[dict[str, Any]]:
        cutoff = (datetime.now(timezone.utc) - timedelta(days=since_days)).isoformat()
        return self._fetch(
            "list_energy_logs",
            user_id,
            f"SELECT * FROM {ENERGY_TABLE} WHERE user_id = ? AND created_at >= ? "
            "ORDER BY created_at DESC, rowid DESC",
            (user_id, cutoff),
        )

    # Pomodoro sessions

    async def append_pomodoro_session(
        self, user_id: str, duration_minutes: int, completed: bool
    ) -> dict[str, Any]:
        record = {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "duration": duration_minutes,
            "completed": completed,
            "created_at": _now(),
        }
        self._execute(
            "append_pomodoro_session",
            user_id,
            f"INSERT INTO {POMODORO_TABLE} (id, user_id, duration, completed, created_at) "
            "VALUES (?, ?, ?, ?, ?)",
            (record["id"], user_id, duration_minutes, int(completed), record["created_at"]),
        )
        return record

    # Progress

    async def append_progress(
        self,
        user_id: str,
        content_id: str,
        format_used: str,
        time_spent: int,
        completed: bool = False,
    ) -> dict[str, Any]:
        record = {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "content_id": content_id,
            "format_used": format_used,
            "time_spent": time_spent,
            "completed": completed,
            "created_at": _now(),
        }
        self._execute(
            "append_progress",
            user_id,
            f"INSERT INTO {PROGRESS_TABLE} "
            "(id, user_id, content_id, format_used, time_spent, completed, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                record["id"],
                user_id,
                content_id,
                format_used,
                time_spent,
                int(completed),
                record["created_at"],
            ),
        )
        return record

    async def list_progress(self, user_id: str) -> list[dict[str, Any]]:
        rows = self._fetch(
            "list_progress",
            user_id,
            f"SELECT * FROM {PROGRESS_TABLE} WHERE user_id = ? ORDER BY created_at DESC, rowid DESC",
            (user_id,),
        )
        for row in rows:
            row["completed"] = bool(row["completed"])
        return rows

    # Profiles

    async def upsert_profile(
        self,
        user_id: str,
        email: str | None = None,
        username: str | None = None,
        full_name: str | None = None,
    ) -> dict[str, Any]:
        profile = {
            "id": user_id,
            "email": email,
            "username": username,
            "full_name": full_name,
            "updated_at": _now(),
        }
        self._execute(
            "upsert_profile",
            user_id,
            f"INSERT INTO {PROFILES_TABLE} (id, email, username, full_name, updated_at) "
            "VALUES (?, ?, ?, ?, ?) "
            "ON CONFLICT(id) DO UPDATE SET email = excluded.email, "
            "username = excluded.username, full_name = excluded.full_name, "
            "updated_at = excluded.updated_at",
            tuple(profile.values()),
        )
        return profile
