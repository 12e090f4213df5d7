"""
Preferences Route - Display and accessibility controls

- GET current preferences
- PATCH a partial edit (persisted best effort)
"""

from fastapi import APIRouter, Depends

from neurolearn.dashboard.backend.models import Preferences, PreferencesResult, PreferencesUpdate
from neurolearn.dashboard.backend.sessions import get_session
from neurolearn.session import LearningSession


router = APIRouter()


def preferences_view(session: LearningSession) -> Preferences:
    return Preferences(
        **session.profile.to_dict(),
        css_variables=session.profile.css_variables(),
    )


@router.get("/{user_id}", response_model=Preferences)
async def get_preferences(session: LearningSession = Depends(get_session)):
    """Live preferences for the user (defaults on first sign-in)."""
    return preferences_view(session)


@router.patch("/{user_id}", response_model=PreferencesResult)
async def update_preferences(
    update: PreferencesUpdate, session: LearningSession = Depends(get_session)
):
    """
    Apply a control edit.

    The edit is kept even when the store is unreachable; persisted=false
    and error tell the client so it can warn or retry.
    """
    changes = update.model_dump(exclude_none=True)
    result = await session.update_preferences(**changes)
    return PreferencesResult(
        preferences=preferences_view(session),
        persisted=result["success"],
        error=result.get("error"),
    )
