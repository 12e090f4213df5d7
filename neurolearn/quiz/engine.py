"""
Tool: Quiz Engine
Purpose: Step through the onboarding quiz and trigger personalization

State:
    step      index of the current question, always 0 <= step < 3
    responses question key -> chosen value; a key exists only once answered
    complete  True once the resolver has run on a full response set

Usage:
    from neurolearn.quiz.engine import QuizEngine

    quiz = QuizEngine()
    quiz.select_option("sensory", "lowStim")
    quiz.advance()                       # step 0 -> 1
    ...
    resolution = quiz.advance(current_text_scale=1.0)   # on the last step
"""

import logging

from neurolearn.quiz.questions import ONBOARDING_QUESTIONS, QuizQuestion
from neurolearn.quiz.resolver import Resolution, resolve

logger = logging.getLogger(__name__)


class QuizEngine:
    """Onboarding quiz state machine."""

    def __init__(self, questions: tuple[QuizQuestion, ...] = ONBOARDING_QUESTIONS):
        if not questions:
            raise ValueError("A quiz needs at least one question")
        self.questions = questions
        self.step = 0
        self.complete = False
        self._responses: dict[str, str] = {}

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> QuizQuestion:
        return self.questions[self.step]

    @property
    def responses(self) -> dict[str, str]:
        """Copy of the recorded responses."""
        return dict(self._responses)

    @property
    def is_last_step(self) -> bool:
        return self.step == self.question_count - 1

    def is_answered(self, key: str) -> bool:
        return key in self._responses

    def select_option(self, question_key: str, value: str) -> None:
        """
        Record or overwrite the answer for question_key.

        Any string is accepted. An empty value clears the answer, so a key
        is only ever present once it holds a real answer.
        """
        key = getattr(question_key, "value", question_key)
        if value:
            self._responses[key] = value
        else:
            self._responses.pop(key, None)

    def advance(self, current_text_scale: float = 1.0) -> Resolution | None:
        """
        Move to the next question, or finish the quiz on the last one.

        A no-op (returns None, state unchanged) until the current question
        is answered. On the last question every question must be answered;
        the resolver then runs and the quiz is marked complete.

        Returns:
            The Resolution when this call completed the quiz, else None
        """
        if not self.is_answered(self.current_question.key.value):
            return None

        if not self.is_last_step:
            self.step += 1
            return None

        if self.answered_count() < self.question_count:
            return None

        resolution = resolve(self._responses, current_text_scale)
        self.complete = True
        logger.info(f"Onboarding quiz completed with {len(resolution.notes)} personalisations")
        return resolution

    def back(self) -> None:
        """Go to the previous question; stays on the first one."""
        self.step = max(0, self.step - 1)

    def reset(self) -> None:
        """Start over: first question, no answers, not complete."""
        self.step = 0
        self.complete = False
        self._responses.clear()

    def answered_count(self) -> int:
        return sum(1 for q in self.questions if q.key.value in self._responses)

    def progress_fraction(self) -> float:
        """Share of questions answered, in [0, 1]."""
        return self.answered_count() / self.question_count

    def to_dict(self) -> dict:
        question = self.current_question
        return {
            "step": self.step,
            "question_count": self.question_count,
            "complete": self.complete,
            "progress": self.progress_fraction(),
            "responses": self.responses,
            "current_question": {
                "key": question.key.value,
                "prompt": question.prompt,
                "description": question.description,
                "options": [
                    {"value": o.value, "label": o.label, "support": o.support}
                    for o in question.options
                ],
            },
        }
