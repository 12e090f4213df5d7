"""Onboarding Quiz - three questions that tune the dashboard

Components:
    questions.py: The ordered questions and their options
    engine.py: Step/answer/complete state machine
    resolver.py: Pure mapping from answers to preference updates and notes

Usage:
    from neurolearn.quiz import QuizEngine

    quiz = QuizEngine()
    quiz.select_option("sensory", "balanced")
    quiz.advance()
"""

from neurolearn.quiz.engine import QuizEngine
from neurolearn.quiz.questions import ONBOARDING_QUESTIONS, QUESTION_ORDER, QuestionKey
from neurolearn.quiz.resolver import FALLBACK_NOTE, Resolution, resolve

__all__ = [
    "FALLBACK_NOTE",
    "ONBOARDING_QUESTIONS",
    "QUESTION_ORDER",
    "QuestionKey",
    "QuizEngine",
    "Resolution",
    "resolve",
]
