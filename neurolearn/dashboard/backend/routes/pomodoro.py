"""
Pomodoro Route - Focus timer controls

The countdown ticks on the server's event loop; clients poll GET for
the remaining time.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from neurolearn.dashboard.backend.models import TimerModeChange, TimerState
from neurolearn.dashboard.backend.sessions import get_session
from neurolearn.session import LearningSession


router = APIRouter()


@router.get("/{user_id}", response_model=TimerState)
async def get_timer(session: LearningSession = Depends(get_session)):
    return TimerState(**session.timer.to_dict())


@router.post("/{user_id}/start", response_model=TimerState)
async def start_timer(session: LearningSession = Depends(get_session)):
    session.start_timer()
    return TimerState(**session.timer.to_dict())


@router.post("/{user_id}/pause", response_model=TimerState)
async def pause_timer(session: LearningSession = Depends(get_session)):
    await session.pause_timer()
    return TimerState(**session.timer.to_dict())


@router.post("/{user_id}/reset", response_model=TimerState)
async def reset_timer(session: LearningSession = Depends(get_session)):
    await session.reset_timer()
    return TimerState(**session.timer.to_dict())


@router.put("/{user_id}/mode", response_model=TimerState)
async def set_timer_mode(change: TimerModeChange, session: LearningSession = Depends(get_session)):
    """Switch focus/break. Only allowed while the timer is stopped."""
    if not session.set_timer_mode(change.mode):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Pause the timer before switching mode",
        )
    return TimerState(**session.timer.to_dict())
