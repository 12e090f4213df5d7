"""
NeuroLearn Dashboard Backend - FastAPI Application

This is the main entry point for the dashboard REST API. It serves the
learning session (preferences, onboarding quiz, energy check-ins and the
pomodoro timer) to the single-page front end.

Usage:
    uvicorn neurolearn.dashboard.backend.main:app --host 127.0.0.1 --port 8080 --reload

    Or run directly:
    python -m neurolearn.dashboard.backend.main
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

# Load .env file before anything else
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from neurolearn import __version__
from neurolearn.config import load_config
from neurolearn.dashboard.backend.models import HealthCheck
from neurolearn.dashboard.backend.routes import api_router
from neurolearn.dashboard.backend.sessions import SessionRegistry
from neurolearn.errors import InvalidPreferenceError
from neurolearn.logging_config import setup_logging
from neurolearn.storage import get_backend
from neurolearn.storage.base import StorageBackend


logger = logging.getLogger(__name__)


def create_app(
    backend: StorageBackend | None = None,
    config: dict[str, Any] | None = None,
) -> FastAPI:
    """
    Build the dashboard application.

    Args:
        backend: Storage backend; built from config when omitted
        config: Configuration dict; loaded from args/neurolearn.yaml when omitted
    """
    app_config = config if config is not None else load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info("Starting NeuroLearn Dashboard Backend...")
        storage = backend if backend is not None else get_backend(app_config)
        app.state.registry = SessionRegistry(storage, app_config)
        logger.info(f"Storage backend: {storage.name}")

        yield

        logger.info("Shutting down NeuroLearn Dashboard Backend...")
        await app.state.registry.close()

    app = FastAPI(
        title="NeuroLearn Dashboard API",
        description="Adaptive learning dashboard for neurodivergent learners",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.get("dashboard", {}).get("cors_origins", []),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidPreferenceError)
    async def invalid_preference_handler(request: Request, exc: InvalidPreferenceError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": str(exc), "field": exc.field},
        )

    @app.get("/api/health", response_model=HealthCheck, tags=["health"])
    async def health(request: Request):
        registry: SessionRegistry = request.app.state.registry
        return HealthCheck(version=__version__, storage=registry.backend.name)

    app.include_router(api_router)
    return app


_config = load_config()
setup_logging(config=_config)
app = create_app(config=_config)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8080)
