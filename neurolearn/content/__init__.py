"""Multi-format lesson content and the tutor stub."""

from neurolearn.content.modes import LEARNING_MODE_CONTENT, ModeContent, get_mode_content
from neurolearn.content.tutor import TUTOR_GREETING, explain

__all__ = ["LEARNING_MODE_CONTENT", "TUTOR_GREETING", "ModeContent", "explain", "get_mode_content"]
