"""Dashboard API Routes Package

This module aggregates all route handlers into a single router
that can be included in the main FastAPI application.
"""

from fastapi import APIRouter

from .energy import router as energy_router
from .pomodoro import router as pomodoro_router
from .preferences import router as preferences_router
from .quiz import router as quiz_router


# Create main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(preferences_router, prefix="/preferences", tags=["preferences"])
api_router.include_router(quiz_router, prefix="/quiz", tags=["quiz"])
api_router.include_router(energy_router, prefix="/energy", tags=["energy"])
api_router.include_router(pomodoro_router, prefix="/pomodoro", tags=["pomodoro"])

__all__ = ["api_router"]
