"""
Tool: Personalization Resolver
Purpose: Map onboarding quiz answers to preference updates and notes

Pure and deterministic: the same responses (and the same current text
scale) always give the same updates, mode and notes.

Each question key contributes its own fields. When two keys touch the
same field (theme), the key asked first keeps it. Notes follow question
order, never answer order. Missing keys and unrecognised values
contribute nothing.

Usage:
    from neurolearn.quiz.resolver import resolve

    result = resolve({"sensory": "lowStim", "attention": "micro", "intake": "visual"})
    result.updates      # {"sensory_reduced": True, "theme": Theme.CALM, ...}
    result.mode         # LearningMode.VISUAL
    result.display_notes()
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from neurolearn.preferences.models import LearningMode, Theme
from neurolearn.quiz.questions import QUESTION_ORDER, QuestionKey

FALLBACK_NOTE = "Profile synced — adjust controls anytime."
LOW_STIM_MIN_TEXT_SCALE = 1.1


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a set of quiz responses."""

    updates: dict[str, Any] = field(default_factory=dict)
    notes: tuple[str, ...] = ()
    mode: LearningMode | None = None
    reset_timer_to_focus: bool = False

    def display_notes(self) -> list[str]:
        """Notes to show; the fallback note when nothing was personalised."""
        return list(self.notes) if self.notes else [FALLBACK_NOTE]


def _sensory(value: str, current_text_scale: float) -> tuple[dict[str, Any], str] | None:
    if value == "lowStim":
        return (
            {
                "sensory_reduced": True,
                "theme": Theme.CALM,
                "text_scale": max(current_text_scale, LOW_STIM_MIN_TEXT_SCALE),
            },
            "Enabled sensory-reduced mode with a calm palette.",
        )
    if value == "highContrast":
        return (
            {"theme": Theme.CONTRAST, "sensory_reduced": False},
            "Activated high-contrast colours for crisp edges.",
        )
    if value == "balanced":
        return {"theme": Theme.CALM}, "Kept balanced contrast with predictable highlights."
    return None


def _attention(value: str) -> tuple[dict[str, Any], str] | None:
    if value == "micro":
        return {"focus_mode": True}, "Focus mode stays on for short bursts."
    if value == "steady":
        return {"focus_mode": False}, "Scheduled steady 25-minute cycles."
    if value == "deep":
        return {"focus_mode": True, "theme": Theme.DARK}, "Deep-focus styling with darker surfaces."
    return None


INTAKE_MODES: dict[str, tuple[LearningMode, str]] = {
    "visual": (LearningMode.VISUAL, "Prioritising visual storyboard mode."),
    "audio": (LearningMode.AUDIO, "Surfacing narrated audio mode first."),
    "text": (LearningMode.TEXT, "Keeping simplified text at the forefront."),
}


def resolve(responses: Mapping[str, str], current_text_scale: float = 1.0) -> Resolution:
    """
    Resolve quiz responses into preference updates, notes and a mode.

    Args:
        responses: question key -> chosen option value
        current_text_scale: the live text scale; low-stimulation answers
            only ever raise it

    Returns:
        Resolution with updates, ordered notes, optional mode and whether
        the pomodoro timer should return to its focus preset
    """
    updates: dict[str, Any] = {}
    notes: list[str] = []
    mode: LearningMode | None = None
    reset_timer = False

    for key in QUESTION_ORDER:
        value = responses.get(key.value)
        if not value:
            continue

        contribution: tuple[dict[str, Any], str] | None = None
        if key is QuestionKey.SENSORY:
            contribution = _sensory(value, current_text_scale)
        elif key is QuestionKey.ATTENTION:
            contribution = _attention(value)
            reset_timer = value == "micro"
        elif key is QuestionKey.INTAKE and value in INTAKE_MODES:
            mode, note = INTAKE_MODES[value]
            contribution = ({}, note)

        if contribution is None:
            continue

        fields, note = contribution
        for name, field_value in fields.items():
            updates.setdefault(name, field_value)
        notes.append(note)

    return Resolution(
        updates=updates, notes=tuple(notes), mode=mode, reset_timer_to_focus=reset_timer
    )


__all__ = ["FALLBACK_NOTE", "Resolution", "resolve"]
