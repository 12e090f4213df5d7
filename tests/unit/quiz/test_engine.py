"""Tests for neurolearn/quiz/engine.py

The quiz engine is a small state machine:
- step stays within [0, question_count)
- advance only moves past answered questions
- the last advance resolves and completes
- reset starts over
"""

import pytest

from neurolearn.preferences.models import LearningMode
from neurolearn.quiz.engine import QuizEngine
from neurolearn.quiz.questions import QuestionKey


@pytest.fixture
def quiz():
    return QuizEngine()


def answer_all(quiz, responses):
    for key, value in responses.items():
        quiz.select_option(key, value)
        quiz.advance()


class TestInitialState:
    def test_starts_on_first_question(self, quiz):
        assert quiz.step == 0
        assert quiz.complete is False
        assert quiz.responses == {}
        assert quiz.question_count == 3
        assert quiz.current_question.key is QuestionKey.SENSORY


class TestSelectOption:
    def test_records_and_overwrites(self, quiz):
        quiz.select_option("sensory", "lowStim")
        quiz.select_option("sensory", "balanced")
        assert quiz.responses == {"sensory": "balanced"}

    def test_accepts_any_string(self, quiz):
        quiz.select_option("sensory", "something-new")
        assert quiz.is_answered("sensory")

    def test_accepts_enum_key(self, quiz):
        quiz.select_option(QuestionKey.INTAKE, "audio")
        assert quiz.responses == {"intake": "audio"}

    def test_empty_value_clears_answer(self, quiz):
        quiz.select_option("sensory", "lowStim")
        quiz.select_option("sensory", "")
        assert not quiz.is_answered("sensory")

    def test_responses_is_a_copy(self, quiz):
        quiz.responses["sensory"] = "lowStim"
        assert quiz.responses == {}


class TestAdvance:
    def test_unanswered_question_is_noop(self, quiz):
        assert quiz.advance() is None
        assert quiz.step == 0

    def test_answered_question_moves_on(self, quiz):
        quiz.select_option("sensory", "lowStim")
        assert quiz.advance() is None
        assert quiz.step == 1

    def test_last_step_without_answer_is_noop(self, quiz):
        quiz.select_option("sensory", "lowStim")
        quiz.advance()
        quiz.select_option("attention", "micro")
        quiz.advance()
        before = (quiz.step, quiz.complete, quiz.responses)

        assert quiz.advance() is None
        assert (quiz.step, quiz.complete, quiz.responses) == before
        assert quiz.step == 2

    def test_last_step_resolves_and_completes(self, quiz):
        answer_all(quiz, {"sensory": "lowStim", "attention": "micro"})
        quiz.select_option("intake", "visual")

        resolution = quiz.advance(current_text_scale=1.0)

        assert quiz.complete is True
        assert quiz.step == 2
        assert resolution is not None
        assert resolution.mode is LearningMode.VISUAL
        assert len(resolution.notes) == 3

    def test_last_step_needs_every_answer(self, quiz):
        quiz.select_option("sensory", "lowStim")
        quiz.advance()
        quiz.select_option("attention", "micro")
        quiz.advance()
        quiz.select_option("intake", "visual")
        quiz.select_option("sensory", "")

        assert quiz.advance() is None
        assert quiz.complete is False

    def test_step_never_passes_last_index(self, quiz, calm_visual_responses):
        answer_all(quiz, calm_visual_responses)
        quiz.advance()
        assert quiz.step == quiz.question_count - 1


class TestBack:
    def test_back_at_first_question_stays(self, quiz):
        quiz.back()
        assert quiz.step == 0

    def test_back_moves_to_previous(self, quiz):
        quiz.select_option("sensory", "lowStim")
        quiz.advance()
        quiz.back()
        assert quiz.step == 0
        assert quiz.responses == {"sensory": "lowStim"}

    def test_back_allowed_after_completion(self, quiz, calm_visual_responses):
        answer_all(quiz, calm_visual_responses)
        quiz.back()
        assert quiz.step == 1


class TestProgress:
    def test_progress_in_question_order(self, quiz, calm_visual_responses):
        assert quiz.progress_fraction() == 0

        seen = []
        for key, value in calm_visual_responses.items():
            quiz.select_option(key, value)
            seen.append(quiz.progress_fraction())
            quiz.advance()

        assert seen == pytest.approx([1 / 3, 2 / 3, 1.0])

    def test_overwriting_does_not_increase_progress(self, quiz):
        quiz.select_option("sensory", "lowStim")
        quiz.select_option("sensory", "balanced")
        assert quiz.progress_fraction() == pytest.approx(1 / 3)


class TestReset:
    def test_reset_after_completion(self, quiz, calm_visual_responses):
        answer_all(quiz, calm_visual_responses)
        assert quiz.complete is True

        quiz.reset()

        assert quiz.step == 0
        assert quiz.complete is False
        assert quiz.responses == {}
        assert quiz.progress_fraction() == 0


class TestSerialisation:
    def test_to_dict_describes_current_question(self, quiz):
        data = quiz.to_dict()

        assert data["step"] == 0
        assert data["current_question"]["key"] == "sensory"
        assert [o["value"] for o in data["current_question"]["options"]] == [
            "lowStim",
            "balanced",
            "highContrast",
        ]
