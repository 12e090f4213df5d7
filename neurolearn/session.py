"""
Tool: Learning Session
Purpose: Own the live dashboard state for one signed-in user

The session is the only place the live PreferenceProfile changes. Edits
come from two places, direct control edits and the onboarding quiz
resolver, and both go through the same path:

    merge into local profile -> persist complete profile (best effort)

Persistence is optimistic. A failed write is logged, remembered in
last_error, reported to error listeners and returned in the result dict;
local state is never rolled back. Writes from one session are serialised.

Usage:
    from neurolearn.session import LearningSession

    session = LearningSession("alice", backend)
    await session.load()
    await session.update_preferences(theme="contrast")

    session.answer("sensory", "lowStim")
    await session.advance_quiz()
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from neurolearn.config import load_config
from neurolearn.content.modes import ModeContent, get_mode_content
from neurolearn.energy.tracker import EnergyLogEntry, energy_suggestion, log_energy, recent_energy
from neurolearn.errors import PersistenceError
from neurolearn.logging_config import get_logger
from neurolearn.preferences.models import (
    LearningMode,
    PreferenceProfile,
    default_profile,
)
from neurolearn.preferences.service import load_preferences, save_preferences
from neurolearn.quiz.engine import QuizEngine
from neurolearn.quiz.resolver import Resolution
from neurolearn.storage.base import StorageBackend
from neurolearn.tasks.breakdown import TaskBoard
from neurolearn.tasks.routines import RoutineChecklist
from neurolearn.timer.driver import TimerDriver
from neurolearn.timer.pomodoro import CompletedCycle, PomodoroMode, PomodoroTimer

logger = get_logger(__name__)

INITIAL_NOTE = "No profile yet — complete the quiz to auto-tune your dashboard."

ErrorListener = Callable[[PersistenceError], None]


@dataclass(frozen=True)
class Identity:
    """Read-only user data supplied by the identity provider."""

    user_id: str
    email: str | None = None
    username: str | None = None
    full_name: str | None = None


class LearningSession:
    """Live state and persistence for one user's dashboard."""

    def __init__(
        self,
        user_id: str,
        backend: StorageBackend,
        config: dict[str, Any] | None = None,
    ):
        self.user_id = user_id
        self.backend = backend
        self.config = config if config is not None else load_config()

        self.profile: PreferenceProfile = default_profile(user_id)
        self.active_mode = LearningMode.TEXT
        self.notes: list[str] = [INITIAL_NOTE]
        self.quiz = QuizEngine()
        self.tasks = TaskBoard()
        self.routines = RoutineChecklist()

        pomodoro = self.config.get("pomodoro", {})
        self.timer = PomodoroTimer(
            focus_minutes=int(pomodoro.get("focus_minutes", 25)),
            break_minutes=int(pomodoro.get("break_minutes", 5)),
        )
        self.timer_driver = TimerDriver(
            self.timer,
            on_complete=self._record_cycle,
            interval=float(pomodoro.get("tick_seconds", 1)),
        )

        self.last_error: PersistenceError | None = None
        self._error_listeners: list[ErrorListener] = []
        self._write_lock = asyncio.Lock()

    # ─────────────────────────────────────────────────────────────────────
    # Result channel
    # ─────────────────────────────────────────────────────────────────────

    def add_error_listener(self, listener: ErrorListener) -> None:
        """Be told about every persistence failure (retry, user warning...)."""
        self._error_listeners.append(listener)

    def _failed(self, error: PersistenceError, **extra: Any) -> dict[str, Any]:
        logger.warning(
            "persistence_failed",
            user_id=self.user_id,
            operation=error.operation,
            error=str(error),
        )
        self.last_error = error
        for listener in self._error_listeners:
            try:
                listener(error)
            except Exception:
                logger.exception("error_listener_failed", user_id=self.user_id)
        return {"success": False, "error": str(error), **extra}

    # ─────────────────────────────────────────────────────────────────────
    # Preferences
    # ─────────────────────────────────────────────────────────────────────

    async def load(self) -> dict[str, Any]:
        """
        Load the stored profile. A user without a row gets the defaults,
        which are saved straight away (first sign-in).
        """
        try:
            profile, found = await load_preferences(self.backend, self.user_id)
        except PersistenceError as e:
            return self._failed(e, profile=self.profile.to_dict())

        self.profile = profile
        if not found:
            logger.info("preferences_created", user_id=self.user_id)
            return await self._persist()
        return {"success": True, "profile": self.profile.to_dict()}

    async def update_preferences(self, **changes: Any) -> dict[str, Any]:
        """
        Direct control edit.

        Numbers are clamped into range. Unknown fields and bad values raise
        InvalidPreferenceError before anything changes.
        """
        self.profile = self.profile.merge(changes)
        return await self._persist()

    async def apply_resolution(self, resolution: Resolution) -> dict[str, Any]:
        """Merge quiz personalisation into live state and persist it."""
        self.profile = self.profile.merge(resolution.updates)
        if resolution.mode is not None:
            self.active_mode = resolution.mode
        if resolution.reset_timer_to_focus:
            await self.timer_driver.reset()
            self.timer.set_mode(PomodoroMode.FOCUS)
        self.notes = resolution.display_notes()
        return await self._persist()

    async def _persist(self) -> dict[str, Any]:
        async with self._write_lock:
            profile = self.profile
            try:
                stored = await save_preferences(self.backend, profile)
            except PersistenceError as e:
                return self._failed(e, profile=self.profile.to_dict())

            # Adopt the write timestamp unless the profile moved on meanwhile
            if self.profile == profile:
                self.profile = replace(profile, updated_at=stored.updated_at)

        logger.debug("preferences_saved", user_id=self.user_id)
        return {"success": True, "profile": self.profile.to_dict()}

    # ─────────────────────────────────────────────────────────────────────
    # Onboarding quiz
    # ─────────────────────────────────────────────────────────────────────

    def answer(self, question_key: str, value: str) -> None:
        self.quiz.select_option(question_key, value)

    async def advance_quiz(self) -> dict[str, Any] | None:
        """
        Next question, or finish the quiz on the last one.

        Returns the persistence result when this call completed the quiz,
        otherwise None.
        """
        resolution = self.quiz.advance(current_text_scale=self.profile.text_scale)
        if resolution is None:
            return None
        return await self.apply_resolution(resolution)

    def quiz_back(self) -> None:
        self.quiz.back()

    def reset_quiz(self) -> None:
        """Allow the quiz to be taken again; current preferences stay."""
        self.quiz.reset()

    # ─────────────────────────────────────────────────────────────────────
    # Content
    # ─────────────────────────────────────────────────────────────────────

    def set_mode(self, mode: LearningMode | str) -> LearningMode:
        self.active_mode = LearningMode(mode)
        return self.active_mode

    def active_content(self) -> ModeContent:
        return get_mode_content(self.active_mode)

    async def track_progress(
        self,
        content_id: str,
        time_spent: int,
        format_used: LearningMode | str | None = None,
        completed: bool = False,
    ) -> dict[str, Any]:
        mode = LearningMode(format_used) if format_used else self.active_mode
        try:
            record = await self.backend.append_progress(
                self.user_id, content_id, mode.value, time_spent, completed
            )
        except PersistenceError as e:
            return self._failed(e)
        return {"success": True, "record": record}

    # ─────────────────────────────────────────────────────────────────────
    # Pomodoro
    # ─────────────────────────────────────────────────────────────────────

    def start_timer(self) -> None:
        self.timer_driver.start()

    async def pause_timer(self) -> None:
        await self.timer_driver.pause()

    async def reset_timer(self) -> None:
        await self.timer_driver.reset()

    def set_timer_mode(self, mode: PomodoroMode | str) -> bool:
        return self.timer.set_mode(mode)

    async def _record_cycle(self, cycle: CompletedCycle) -> None:
        try:
            await self.backend.append_pomodoro_session(
                self.user_id, cycle.duration_minutes, completed=True
            )
        except PersistenceError as e:
            self._failed(e)

    # ─────────────────────────────────────────────────────────────────────
    # Energy
    # ─────────────────────────────────────────────────────────────────────

    async def log_energy(
        self, slider_value: float, feeling: str, notes: str | None = None
    ) -> dict[str, Any]:
        try:
            entry = await log_energy(self.backend, self.user_id, slider_value, feeling, notes)
        except PersistenceError as e:
            return self._failed(e)
        return {
            "success": True,
            "entry": entry.to_dict(),
            "suggestion": energy_suggestion(slider_value),
        }

    async def energy_history(self, days: int | None = None) -> list[EnergyLogEntry]:
        """Recent check-ins; an unreachable store reads as an empty history."""
        if days is None:
            days = int(self.config.get("energy", {}).get("history_days", 7))
        try:
            return await recent_energy(self.backend, self.user_id, days)
        except PersistenceError as e:
            self._failed(e)
            return []

    # ─────────────────────────────────────────────────────────────────────
    # Identity
    # ─────────────────────────────────────────────────────────────────────

    async def sync_identity(self, identity: Identity) -> dict[str, Any]:
        """Mirror identity-provider display data into the profiles table."""
        try:
            record = await self.backend.upsert_profile(
                identity.user_id,
                email=identity.email,
                username=identity.username,
                full_name=identity.full_name,
            )
        except PersistenceError as e:
            return self._failed(e)
        return {"success": True, "profile": record}

    # ─────────────────────────────────────────────────────────────────────

    def snapshot(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "preferences": self.profile.to_dict(),
            "css_variables": self.profile.css_variables(),
            "active_mode": self.active_mode.value,
            "notes": list(self.notes),
            "quiz": self.quiz.to_dict(),
            "timer": self.timer.to_dict(),
        }

    async def close(self) -> None:
        """Tear down: the timer stops ticking."""
        await self.timer_driver.close()
