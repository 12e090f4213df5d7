"""
Quiz Route - Onboarding quiz

- GET quiz state
- POST answer / advance / back / reset
"""

from typing import Any

from fastapi import APIRouter, Depends

from neurolearn.dashboard.backend.models import QuizAnswer, QuizState
from neurolearn.dashboard.backend.routes.preferences import preferences_view
from neurolearn.dashboard.backend.sessions import get_session
from neurolearn.session import LearningSession


router = APIRouter()


def quiz_view(session: LearningSession, result: dict[str, Any] | None = None) -> QuizState:
    return QuizState(
        **session.quiz.to_dict(),
        notes=session.notes,
        active_mode=session.active_mode,
        preferences=preferences_view(session),
        persisted=result["success"] if result else None,
        error=result.get("error") if result else None,
    )


@router.get("/{user_id}", response_model=QuizState)
async def get_quiz(session: LearningSession = Depends(get_session)):
    return quiz_view(session)


@router.post("/{user_id}/answer", response_model=QuizState)
async def answer_question(answer: QuizAnswer, session: LearningSession = Depends(get_session)):
    session.answer(answer.question_key.value, answer.value)
    return quiz_view(session)


@router.post("/{user_id}/advance", response_model=QuizState)
async def advance_quiz(session: LearningSession = Depends(get_session)):
    """Next question; on the last one, personalise the dashboard."""
    result = await session.advance_quiz()
    return quiz_view(session, result)


@router.post("/{user_id}/back", response_model=QuizState)
async def quiz_back(session: LearningSession = Depends(get_session)):
    session.quiz_back()
    return quiz_view(session)


@router.post("/{user_id}/reset", response_model=QuizState)
async def reset_quiz(session: LearningSession = Depends(get_session)):
    session.reset_quiz()
    return quiz_view(session)
