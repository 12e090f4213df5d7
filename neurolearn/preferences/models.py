"""
Tool: Preference Models
Purpose: Data structures for the per-user display and accessibility profile

Usage:
    from neurolearn.preferences.models import (
        PreferenceProfile,
        Theme,
        LearningMode,
        default_profile,
    )

    profile = default_profile("alice")
    profile = profile.merge({"theme": "contrast", "text_scale": 9})
    profile.text_scale  # 1.6 (clamped)

Invariants:
    - Numeric fields always sit inside NUMERIC_RANGES (clamped, never rejected)
    - theme is always a Theme member
    - font_family is always one of FONT_CHOICES
"""

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any

from neurolearn.errors import InvalidPreferenceError


class Theme(str, Enum):
    """Colour palettes."""

    CALM = "calm"
    CONTRAST = "contrast"
    DARK = "dark"


class LearningMode(str, Enum):
    """Content display formats for lessons."""

    TEXT = "text"
    AUDIO = "audio"
    VISUAL = "visual"
    GAMIFIED = "gamified"
    MATH = "math"


# Font label -> CSS font stack
FONT_CHOICES: dict[str, str] = {
    "Lexend": '"Lexend", "Inter", system-ui, -apple-system, sans-serif',
    "Atkinson Hyperlegible": '"Atkinson Hyperlegible", "Inter", system-ui, sans-serif',
    "OpenDyslexic": '"OpenDyslexic", "Atkinson Hyperlegible", sans-serif',
    "Space Grotesk": '"Space Grotesk", "Segoe UI", sans-serif',
}
DEFAULT_FONT = "Lexend"

# field -> (min, max)
NUMERIC_RANGES: dict[str, tuple[float, float]] = {
    "text_scale": (0.8, 1.6),
    "letter_spacing": (0.0, 3.0),
    "line_height": (1.2, 2.4),
}

BOOLEAN_FIELDS = ("sensory_reduced", "focus_mode")

# Fields a caller may edit (user_id and updated_at are managed)
EDITABLE_FIELDS = frozenset(
    {"font_family", "theme", *NUMERIC_RANGES.keys(), *BOOLEAN_FIELDS}
)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


@dataclass(frozen=True)
class PreferenceProfile:
    """
    A user's display, accessibility and focus settings.

    Immutable: every edit returns a new profile, so the session that owns
    the live profile is the only place state changes.
    """

    user_id: str
    font_family: str = DEFAULT_FONT
    text_scale: float = 1.0
    letter_spacing: float = 0.5
    line_height: float = 1.6
    theme: Theme = Theme.CALM
    sensory_reduced: bool = False
    focus_mode: bool = False
    updated_at: str | None = None

    @property
    def font_stack(self) -> str:
        """CSS font stack for the chosen font."""
        return FONT_CHOICES[self.font_family]

    def merge(self, updates: dict[str, Any]) -> "PreferenceProfile":
        """
        Shallow-merge updates over this profile.

        Fields absent from updates keep their current values. Values are
        normalised first (see normalize_updates).
        """
        if not updates:
            return self
        return replace(self, **normalize_updates(updates))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        data = asdict(self)
        data["theme"] = self.theme.value
        return data

    def css_variables(self) -> dict[str, str]:
        """CSS custom properties a front end applies to the app shell."""
        return {
            "--nl-font-family": self.font_stack,
            "--nl-text-scale": str(self.text_scale),
            "--nl-letter-spacing": f"{self.letter_spacing}px",
            "--nl-line-height": str(self.line_height),
        }


def default_profile(user_id: str) -> PreferenceProfile:
    """Profile applied on first sign-in or when no row exists."""
    return PreferenceProfile(user_id=user_id)


def normalize_updates(updates: dict[str, Any]) -> dict[str, Any]:
    """
    Validate and normalise a partial preference update.

    Numbers are clamped into range; unknown fields, unknown themes,
    unknown fonts and non-numeric values for numeric fields raise
    InvalidPreferenceError.
    """
    unknown = set(updates) - EDITABLE_FIELDS
    if unknown:
        raise InvalidPreferenceError(
            f"Unknown preference fields: {sorted(unknown)}", field=sorted(unknown)[0]
        )

    normalized: dict[str, Any] = {}
    for key, value in updates.items():
        if key in NUMERIC_RANGES:
            if isinstance(value, bool):
                raise InvalidPreferenceError(f"{key} must be a number", field=key)
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise InvalidPreferenceError(f"{key} must be a number", field=key) from None
            low, high = NUMERIC_RANGES[key]
            normalized[key] = clamp(number, low, high)
        elif key == "theme":
            try:
                normalized[key] = Theme(value)
            except ValueError:
                raise InvalidPreferenceError(f"Unknown theme: {value!r}", field=key) from None
        elif key == "font_family":
            if value not in FONT_CHOICES:
                raise InvalidPreferenceError(f"Unknown font: {value!r}", field=key)
            normalized[key] = value
        else:
            normalized[key] = bool(value)
    return normalized


PROFILE_FIELDS = tuple(f.name for f in fields(PreferenceProfile))
