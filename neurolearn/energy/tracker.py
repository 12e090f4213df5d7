"""
Tool: Energy Check-ins
Purpose: Turn the 0-100 energy slider into stored 1-5 check-ins

Energy is a rhythm, not a moral judgment: suggestions only ever point at
the kind of work that fits the current level.

Usage:
    from neurolearn.energy.tracker import log_energy, recent_energy, scale_energy

    scale_energy(60)    # 3
    entry = await log_energy(backend, "alice", slider_value=60, feeling="foggy")
    history = await recent_energy(backend, "alice", days=7)
"""

import logging
from dataclasses import dataclass
from typing import Any

from neurolearn.preferences.models import clamp
from neurolearn.storage.base import StorageBackend

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 5
SLIDER_MAX = 100


@dataclass(frozen=True)
class EnergyLogEntry:
    """A stored energy check-in."""

    user_id: str
    energy_level: int
    feeling: str
    notes: str | None = None
    created_at: str | None = None
    id: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "EnergyLogEntry":
        return cls(
            user_id=row["user_id"],
            energy_level=int(row["energy_level"]),
            feeling=row.get("feeling") or "",
            notes=row.get("notes"),
            created_at=row.get("created_at"),
            id=row.get("id"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "energy_level": self.energy_level,
            "feeling": self.feeling,
            "notes": self.notes,
            "created_at": self.created_at,
        }


def scale_energy(slider_value: float) -> int:
    """Map a 0-100 slider position to a 1-5 level (quarter steps, rounding half up)."""
    position = clamp(float(slider_value), 0, SLIDER_MAX)
    return MIN_LEVEL + int(position / (SLIDER_MAX / (MAX_LEVEL - MIN_LEVEL)) + 0.5)


def energy_suggestion(slider_value: float) -> str:
    """What kind of work suits the current energy."""
    if slider_value > 70:
        return "Energy is bright — schedule deeper work or a creative sprint."
    if slider_value > 40:
        return "Moderate energy — mix focus with short movement or hydration breaks."
    return "Low energy — switch to review tasks, journaling, or grounding exercises."


async def log_energy(
    backend: StorageBackend,
    user_id: str,
    slider_value: float,
    feeling: str,
    notes: str | None = None,
) -> EnergyLogEntry:
    """
    Store an energy check-in.

    Raises:
        PersistenceError: the backend failed the write
    """
    level = scale_energy(slider_value)
    row = await backend.append_energy_log(user_id, level, feeling.strip(), notes or None)
    logger.debug(f"Energy level {level} logged for {user_id}")
    return EnergyLogEntry.from_row(row)


async def recent_energy(backend: StorageBackend, user_id: str, days: int = 7) -> list[EnergyLogEntry]:
    """Check-ins from the last days days, most recent first."""
    rows = await backend.list_energy_logs(user_id, since_days=days)
    return [EnergyLogEntry.from_row(row) for row in rows]
