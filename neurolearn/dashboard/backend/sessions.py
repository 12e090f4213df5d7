"""
Session registry - one LearningSession per user for the life of the app.
"""

import asyncio
import logging
from typing import Any

from fastapi import Request

from neurolearn.logging_config import bind_user
from neurolearn.session import LearningSession
from neurolearn.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Creates, loads and tears down per-user sessions."""

    def __init__(self, backend: StorageBackend, config: dict[str, Any]):
        self.backend = backend
        self.config = config
        self._sessions: dict[str, LearningSession] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    async def get(self, user_id: str) -> LearningSession:
        """
        Return the user's session, loading stored preferences on first use.

        Loads are serialised per user; a slow store read for one user does
        not hold up any other user.
        """
        lock = self._locks.setdefault(user_id, asyncio.Lock())
        async with lock:
            session = self._sessions.get(user_id)
            if session is None:
                session = LearningSession(user_id, self.backend, self.config)
                result = await session.load()
                if not result["success"]:
                    logger.warning(f"Session for {user_id} started on defaults: {result['error']}")
                self._sessions[user_id] = session
            return session

    async def close(self) -> None:
        for session in self._sessions.values():
            await session.close()
        self._sessions.clear()
        self._locks.clear()
        await self.backend.close()


async def get_session(user_id: str, request: Request) -> LearningSession:
    """FastAPI dependency: the session for the user_id path parameter."""
    bind_user(user_id)
    registry: SessionRegistry = request.app.state.registry
    return await registry.get(user_id)
