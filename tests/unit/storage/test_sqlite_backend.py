"""Tests for neurolearn/storage/sqlite.py

The local backend must:
- keep at most one preference row per user
- return None (not raise) for a missing row
- wrap sqlite errors in PersistenceError
"""

import pytest

from neurolearn.errors import PersistenceError
from neurolearn.storage.sqlite import SQLiteBackend


PREFS_ROW = {
    "font_family": "Lexend",
    "text_scale": 1.0,
    "letter_spacing": 0.5,
    "line_height": 1.6,
    "theme": "calm",
    "sensory_reduced": False,
    "focus_mode": True,
    "updated_at": None,
}


class TestPreferences:
    @pytest.mark.asyncio
    async def test_missing_row_is_none(self, sqlite_backend, mock_user_id):
        assert await sqlite_backend.get_preferences(mock_user_id) is None

    @pytest.mark.asyncio
    async def test_upsert_inserts_then_updates(self, sqlite_backend, mock_user_id):
        first = await sqlite_backend.upsert_preferences(mock_user_id, PREFS_ROW)
        second = await sqlite_backend.upsert_preferences(mock_user_id, {**PREFS_ROW, "theme": "dark"})

        assert first["theme"] == "calm"
        assert second["theme"] == "dark"
        assert second["focus_mode"] == 1
        assert second["updated_at"]

    @pytest.mark.asyncio
    async def test_rows_are_per_user(self, sqlite_backend):
        await sqlite_backend.upsert_preferences("alice", PREFS_ROW)
        await sqlite_backend.upsert_preferences("bob", {**PREFS_ROW, "theme": "contrast"})

        assert (await sqlite_backend.get_preferences("alice"))["theme"] == "calm"
        assert (await sqlite_backend.get_preferences("bob"))["theme"] == "contrast"

    @pytest.mark.asyncio
    async def test_sqlite_error_wrapped(self, tmp_path, mock_user_id):
        backend = SQLiteBackend(tmp_path)  # a directory cannot be opened as a database

        with pytest.raises(PersistenceError) as exc:
            await backend.get_preferences(mock_user_id)

        assert exc.value.operation == "get_preferences"
        assert exc.value.user_id == mock_user_id


class TestAppendOnlyTables:
    @pytest.mark.asyncio
    async def test_pomodoro_session(self, sqlite_backend, mock_user_id):
        record = await sqlite_backend.append_pomodoro_session(mock_user_id, 25, completed=True)

        assert record["duration"] == 25
        assert record["completed"] is True

    @pytest.mark.asyncio
    async def test_progress_round_trip(self, sqlite_backend, mock_user_id):
        await sqlite_backend.append_progress(mock_user_id, "neurons-101", "visual", 120)
        await sqlite_backend.append_progress(mock_user_id, "neurons-102", "audio", 60, completed=True)

        records = await sqlite_backend.list_progress(mock_user_id)

        assert [r["content_id"] for r in records] == ["neurons-102", "neurons-101"]
        assert records[0]["completed"] is True

    @pytest.mark.asyncio
    async def test_energy_level_check_constraint(self, sqlite_backend, mock_user_id):
        with pytest.raises(PersistenceError):
            await sqlite_backend.append_energy_log(mock_user_id, 9, "off the scale")

    @pytest.mark.asyncio
    async def test_profile_upsert(self, sqlite_backend, mock_user_id):
        await sqlite_backend.upsert_profile(mock_user_id, email="a@example.com")
        await sqlite_backend.upsert_profile(mock_user_id, email="b@example.com", full_name="Sam")

        conn = sqlite_backend.get_connection()
        rows = conn.execute("SELECT * FROM profiles").fetchall()
        conn.close()

        assert len(rows) == 1
        assert rows[0]["email"] == "b@example.com"
        assert rows[0]["full_name"] == "Sam"
