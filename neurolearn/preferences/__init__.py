"""Preference profile: model, validation and load/save service."""

from neurolearn.preferences.models import (
    FONT_CHOICES,
    NUMERIC_RANGES,
    LearningMode,
    PreferenceProfile,
    Theme,
    default_profile,
    normalize_updates,
)
from neurolearn.preferences.service import (
    load_preferences,
    profile_to_row,
    row_to_profile,
    save_preferences,
)

__all__ = [
    "FONT_CHOICES",
    "NUMERIC_RANGES",
    "LearningMode",
    "PreferenceProfile",
    "Theme",
    "default_profile",
    "load_preferences",
    "normalize_updates",
    "profile_to_row",
    "row_to_profile",
    "save_preferences",
]
