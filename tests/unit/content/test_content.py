"""Tests for neurolearn/content - lesson modes and the tutor stub."""

import pytest

from neurolearn.content.modes import LEARNING_MODE_CONTENT, get_mode_content
from neurolearn.content.tutor import explain
from neurolearn.preferences.models import LearningMode


class TestModes:
    def test_every_mode_has_content(self):
        assert set(LEARNING_MODE_CONTENT) == set(LearningMode)

    def test_lookup_by_string(self):
        assert get_mode_content("visual").title == "Visual storyboard"

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            get_mode_content("smell")


class TestTutor:
    def test_blank_prompt(self):
        assert explain("   ") is None

    def test_stepwise_answer(self):
        answer = explain("  photosynthesis ")

        assert "“photosynthesis”" in answer
        assert "Step 1" in answer and "Step 2" in answer and "Step 3" in answer
