"""
Onboarding quiz questions.

Three questions, asked in this order. Option values are what the
personalization resolver understands; labels and support text are for
display only.
"""

from dataclasses import dataclass
from enum import Enum


class QuestionKey(str, Enum):
    """Quiz question identifiers, in question order."""

    SENSORY = "sensory"
    ATTENTION = "attention"
    INTAKE = "intake"


@dataclass(frozen=True)
class QuizOption:
    value: str
    label: str
    support: str


@dataclass(frozen=True)
class QuizQuestion:
    key: QuestionKey
    prompt: str
    description: str
    options: tuple[QuizOption, ...]

    def option_values(self) -> list[str]:
        return [option.value for option in self.options]


ONBOARDING_QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        key=QuestionKey.SENSORY,
        prompt="How should the interface feel right now?",
        description="We adapt colour, contrast, and motion to match your sensory load.",
        options=(
            QuizOption("lowStim", "Calm + soft", "Minimal animation · muted palette · reading ruler on"),
            QuizOption("balanced", "Balanced contrast", "Standard interface with gentle highlights"),
            QuizOption("highContrast", "High contrast", "Bold outlines · maximum clarity · crisp edges"),
        ),
    ),
    QuizQuestion(
        key=QuestionKey.ATTENTION,
        prompt="How is your attention today?",
        description="We can shorten modules, activate focus mode, or extend sessions.",
        options=(
            QuizOption("micro", "Short bursts", "10–12 min sprints + extra reminders"),
            QuizOption("steady", "Steady pacing", "25 min cycles + regular check-ins"),
            QuizOption("deep", "Locked-in mode", "Longer sessions + darker theme"),
        ),
    ),
    QuizQuestion(
        key=QuestionKey.INTAKE,
        prompt="What helps the most with this topic?",
        description="We’ll prioritise that format in the multi-mode canvas.",
        options=(
            QuizOption("visual", "Visual guides", "Storyboards, diagrams, timelines"),
            QuizOption("audio", "Audio walkthroughs", "Calm narration with speed + pitch control"),
            QuizOption("text", "Simplified text", "Short sentences + highlighted verbs"),
        ),
    ),
)

QUESTION_ORDER: tuple[QuestionKey, ...] = tuple(q.key for q in ONBOARDING_QUESTIONS)
