"""Tests for neurolearn/energy/tracker.py

Energy check-ins:
- 0-100 slider scales to a 1-5 level
- Suggestions follow the slider thresholds
- Logged entries come back most recent first
"""

import pytest

from neurolearn.energy.tracker import (
    EnergyLogEntry,
    energy_suggestion,
    log_energy,
    recent_energy,
    scale_energy,
)
from neurolearn.errors import PersistenceError


class TestScaleEnergy:
    @pytest.mark.parametrize(
        "slider, level",
        [(0, 1), (10, 1), (13, 2), (25, 2), (50, 3), (60, 3), (75, 4), (90, 5), (100, 5)],
    )
    def test_scaling(self, slider, level):
        assert scale_energy(slider) == level

    def test_out_of_range_slider_is_clamped(self):
        assert scale_energy(-20) == 1
        assert scale_energy(250) == 5

    def test_scaling_is_monotonic(self):
        levels = [scale_energy(value) for value in range(101)]
        assert levels == sorted(levels)


class TestSuggestion:
    def test_bright(self):
        assert energy_suggestion(71).startswith("Energy is bright")

    def test_moderate(self):
        assert energy_suggestion(70).startswith("Moderate energy")
        assert energy_suggestion(41).startswith("Moderate energy")

    def test_low(self):
        assert energy_suggestion(40).startswith("Low energy")


class TestEnergyLog:
    @pytest.mark.asyncio
    async def test_log_and_list(self, sqlite_backend, mock_user_id):
        first = await log_energy(sqlite_backend, mock_user_id, 20, "tired")
        second = await log_energy(sqlite_backend, mock_user_id, 95, " buzzing ", notes="coffee")

        entries = await recent_energy(sqlite_backend, mock_user_id, days=7)

        assert [e.id for e in entries] == [second.id, first.id]
        assert entries[0].energy_level == 5
        assert entries[0].feeling == "buzzing"
        assert entries[0].notes == "coffee"
        assert entries[1].energy_level == 2

    @pytest.mark.asyncio
    async def test_history_is_per_user(self, sqlite_backend, mock_user_id):
        await log_energy(sqlite_backend, "someone_else", 50, "ok")
        assert await recent_energy(sqlite_backend, mock_user_id) == []

    @pytest.mark.asyncio
    async def test_old_entries_excluded(self, sqlite_backend, mock_user_id):
        await log_energy(sqlite_backend, mock_user_id, 50, "ok")
        conn = sqlite_backend.get_connection()
        conn.execute("UPDATE energy_logs SET created_at = '2000-01-01T00:00:00+00:00'")
        conn.commit()
        conn.close()

        assert await recent_energy(sqlite_backend, mock_user_id, days=7) == []

    @pytest.mark.asyncio
    async def test_blank_notes_stored_as_none(self, sqlite_backend, mock_user_id):
        entry = await log_energy(sqlite_backend, mock_user_id, 50, "ok", notes="")
        assert entry.notes is None

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, failing_backend, mock_user_id):
        with pytest.raises(PersistenceError):
            await log_energy(failing_backend, mock_user_id, 50, "ok")

    def test_entry_from_row(self, mock_user_id):
        entry = EnergyLogEntry.from_row(
            {"user_id": mock_user_id, "energy_level": "4", "feeling": None}
        )
        assert entry.energy_level == 4
        assert entry.feeling == ""
