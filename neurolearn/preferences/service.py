"""
Tool: Preference Service
Purpose: Load and save preference profiles through a storage backend

Translates between the in-memory PreferenceProfile and the persisted row
shape (snake_case columns, integer booleans in SQLite, plain strings for
enums). Rows written by older clients are repaired on load: unknown
themes or fonts fall back to defaults, out-of-range numbers are clamped.

Usage:
    from neurolearn.preferences.service import load_preferences, save_preferences

    profile, found = await load_preferences(backend, "alice")
    stored = await save_preferences(backend, profile.merge({"theme": "dark"}))
"""

import logging
from typing import Any

from neurolearn.errors import PersistenceError
from neurolearn.preferences.models import (
    BOOLEAN_FIELDS,
    DEFAULT_FONT,
    FONT_CHOICES,
    NUMERIC_RANGES,
    PreferenceProfile,
    Theme,
    clamp,
    default_profile,
)
from neurolearn.storage.base import StorageBackend

logger = logging.getLogger(__name__)


def profile_to_row(profile: PreferenceProfile) -> dict[str, Any]:
    """Convert a profile to the persisted row shape."""
    return {
        "user_id": profile.user_id,
        "font_family": profile.font_family,
        "text_scale": profile.text_scale,
        "letter_spacing": profile.letter_spacing,
        "line_height": profile.line_height,
        "theme": profile.theme.value,
        "sensory_reduced": profile.sensory_reduced,
        "focus_mode": profile.focus_mode,
        "updated_at": profile.updated_at,
    }


def row_to_profile(row: dict[str, Any]) -> PreferenceProfile:
    """
    Convert a persisted row to a profile.

    Missing or unusable values take the default for that field.
    """
    defaults = default_profile(row["user_id"])
    values: dict[str, Any] = {"user_id": row["user_id"], "updated_at": row.get("updated_at")}

    for key, (low, high) in NUMERIC_RANGES.items():
        try:
            values[key] = clamp(float(row[key]), low, high)
        except (KeyError, TypeError, ValueError):
            values[key] = getattr(defaults, key)

    for key in BOOLEAN_FIELDS:
        raw = row.get(key)
        values[key] = bool(raw) if raw is not None else getattr(defaults, key)

    try:
        values["theme"] = Theme(row.get("theme"))
    except ValueError:
        logger.info(f"Unknown theme {row.get('theme')!r} for {row['user_id']}, using default")
        values["theme"] = defaults.theme

    font = row.get("font_family")
    values["font_family"] = font if font in FONT_CHOICES else DEFAULT_FONT

    return PreferenceProfile(**values)


async def load_preferences(
    backend: StorageBackend, user_id: str
) -> tuple[PreferenceProfile, bool]:
    """
    Load a user's profile.

    Returns:
        (profile, found). When no row exists the default profile is
        returned with found=False; absence is not an error.

    Raises:
        PersistenceError: the backend could not be read
    """
    row = await backend.get_preferences(user_id)
    if row is None:
        logger.debug(f"No preferences stored for {user_id}, applying defaults")
        return default_profile(user_id), False
    return row_to_profile(row), True


async def save_preferences(backend: StorageBackend, profile: PreferenceProfile) -> PreferenceProfile:
    """
    Upsert the complete profile, keyed by user_id.

    Returns:
        The profile as stored (with the backend's updated_at).

    Raises:
        PersistenceError: the backend rejected or failed the write
    """
    row = profile_to_row(profile)
    row["updated_at"] = None  # backend stamps the write time
    stored = await backend.upsert_preferences(profile.user_id, row)
    if not stored or "user_id" not in stored:
        raise PersistenceError("Backend returned no row", "save_preferences", profile.user_id)
    return row_to_profile(stored)


__all__ = ["load_preferences", "profile_to_row", "row_to_profile", "save_preferences"]
