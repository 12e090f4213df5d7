"""
Energy Route - Energy check-ins

- POST a check-in from the 0-100 slider
- GET recent check-ins, most recent first
"""

from fastapi import APIRouter, Depends, Query

from neurolearn.dashboard.backend.models import (
    EnergyCheckIn,
    EnergyCheckInResult,
    EnergyEntry,
    EnergyHistory,
)
from neurolearn.dashboard.backend.sessions import get_session
from neurolearn.session import LearningSession


router = APIRouter()


@router.post("/{user_id}", response_model=EnergyCheckInResult)
async def log_energy(check_in: EnergyCheckIn, session: LearningSession = Depends(get_session)):
    result = await session.log_energy(check_in.slider_value, check_in.feeling, check_in.notes)
    if not result["success"]:
        return EnergyCheckInResult(persisted=False, error=result["error"])
    return EnergyCheckInResult(
        persisted=True,
        entry=EnergyEntry(**result["entry"]),
        suggestion=result["suggestion"],
    )


@router.get("/{user_id}", response_model=EnergyHistory)
async def energy_history(
    days: int = Query(7, ge=1, le=365),
    session: LearningSession = Depends(get_session),
):
    entries = await session.energy_history(days)
    return EnergyHistory(entries=[EnergyEntry(**e.to_dict()) for e in entries], days=days)
