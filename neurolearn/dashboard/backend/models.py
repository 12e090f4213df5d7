"""
Pydantic models for Dashboard API request/response types.

These models define the data structures for all dashboard endpoints,
providing validation, serialization, and documentation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from neurolearn.preferences.models import LearningMode, Theme
from neurolearn.quiz.questions import QuestionKey
from neurolearn.timer.pomodoro import PomodoroMode


# =============================================================================
# Health
# =============================================================================


class HealthCheck(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Overall system status")
    version: str = Field(..., description="API version")
    storage: str = Field(..., description="Active storage backend")
    timestamp: datetime = Field(default_factory=datetime.now, description="Check timestamp")


# =============================================================================
# Preference Models
# =============================================================================


class Preferences(BaseModel):
    """A user's display and accessibility profile."""

    user_id: str
    font_family: str
    text_scale: float
    letter_spacing: float
    line_height: float
    theme: Theme
    sensory_reduced: bool
    focus_mode: bool
    updated_at: str | None = None
    css_variables: dict[str, str] = Field(default_factory=dict)


class PreferencesUpdate(BaseModel):
    """Partial edit from a dashboard control. Numbers are clamped, not rejected."""

    model_config = ConfigDict(extra="forbid")

    font_family: str | None = None
    text_scale: float | None = None
    letter_spacing: float | None = None
    line_height: float | None = None
    theme: Theme | None = None
    sensory_reduced: bool | None = None
    focus_mode: bool | None = None


class PreferencesResult(BaseModel):
    """Live preferences plus whether the write reached the store."""

    preferences: Preferences
    persisted: bool
    error: str | None = Field(None, description="Store error when persisted is false")


# =============================================================================
# Quiz Models
# =============================================================================


class QuizOptionView(BaseModel):
    value: str
    label: str
    support: str


class QuizQuestionView(BaseModel):
    key: QuestionKey
    prompt: str
    description: str
    options: list[QuizOptionView]


class QuizAnswer(BaseModel):
    """Answer for one quiz question."""

    question_key: QuestionKey
    value: str = Field(..., description="Chosen option value; empty clears the answer")


class QuizState(BaseModel):
    """Quiz progress plus the personalisation it produced."""

    step: int
    question_count: int
    complete: bool
    progress: float = Field(..., ge=0, le=1)
    responses: dict[str, str]
    current_question: QuizQuestionView
    notes: list[str]
    active_mode: LearningMode
    preferences: Preferences
    persisted: bool | None = Field(None, description="Set when this request completed the quiz")
    error: str | None = None


# =============================================================================
# Energy Models
# =============================================================================


class EnergyCheckIn(BaseModel):
    slider_value: float = Field(..., description="Energy slider position, 0-100")
    feeling: str = ""
    notes: str | None = None


class EnergyEntry(BaseModel):
    id: str | None = None
    user_id: str
    energy_level: int = Field(..., ge=1, le=5)
    feeling: str
    notes: str | None = None
    created_at: str | None = None


class EnergyCheckInResult(BaseModel):
    persisted: bool
    entry: EnergyEntry | None = None
    suggestion: str | None = None
    error: str | None = None


class EnergyHistory(BaseModel):
    entries: list[EnergyEntry]
    days: int


# =============================================================================
# Pomodoro Models
# =============================================================================


class TimerState(BaseModel):
    mode: PomodoroMode
    seconds_remaining: int = Field(..., ge=0)
    running: bool
    display: str


class TimerModeChange(BaseModel):
    mode: PomodoroMode
