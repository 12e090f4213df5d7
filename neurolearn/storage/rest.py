"""
Tool: Hosted Storage Backend
Purpose: Persist to a hosted relational backend through its PostgREST-style
HTTP API (tables exposed under /rest/v1/<table>)

Usage:
    from neurolearn.storage.rest import RestBackend

    backend = RestBackend(base_url="https://project.example.co", api_key="...")
    row = await backend.get_preferences("alice")
    await backend.close()

Conventions of the remote API:
    - Filters are query params: ?user_id=eq.alice
    - Upserts are POSTs with Prefer: resolution=merge-duplicates and on_conflict
    - return=representation makes writes echo the stored rows

Dependencies:
    - httpx
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

from neurolearn.errors import PersistenceError
from neurolearn.storage.base import (
    ENERGY_TABLE,
    POMODORO_TABLE,
    PREFERENCES_TABLE,
    PROFILES_TABLE,
    PROGRESS_TABLE,
    StorageBackend,
)

logger = logging.getLogger(__name__)


RETURN_REPRESENTATION = "return=representation"
UPSERT_PREFER = f"resolution=merge-duplicates,{RETURN_REPRESENTATION}"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class RestBackend(StorageBackend):
    """StorageBackend over a hosted PostgREST-style API."""

    name = "rest"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def _request(
        self,
        operation: str,
        user_id: str,
        method: str,
        table: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        prefer: str | None = None,
    ) -> list[dict[str, Any]]:
        headers = {"Prefer": prefer} if prefer else None
        try:
            response = await self._client.request(
                method, f"/{table}", params=params, json=json, headers=headers
            )
            response.raise_for_status()
            payload = response.json() if response.content else []
        except httpx.HTTPStatusError as e:
            raise PersistenceError(
                f"{operation} failed with HTTP {e.response.status_code}", operation, user_id
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise PersistenceError(f"{operation} failed: {e}", operation, user_id) from e

        if isinstance(payload, dict):
            payload = [payload]
        logger.debug(f"{operation} ok for {user_id} ({len(payload)} rows)")
        return payload

    def _single(self, operation: str, user_id: str, rows: list[dict[str, Any]]) -> dict[str, Any]:
        if not rows:
            raise PersistenceError(f"{operation} returned no row", operation, user_id)
        return rows[0]

    # Preferences

    async def get_preferences(self, user_id: str) -> dict[str, Any] | None:
        rows = await self._request(
            "get_preferences",
            user_id,
            "GET",
            PREFERENCES_TABLE,
            params={"user_id": f"eq.{user_id}", "select": "*"},
        )
        return rows[0] if rows else None

    async def upsert_preferences(self, user_id: str, row: dict[str, Any]) -> dict[str, Any]:
        body = {**row, "user_id": user_id, "updated_at": row.get("updated_at") or _now()}
        rows = await self._request(
            "upsert_preferences",
            user_id,
            "POST",
            PREFERENCES_TABLE,
            params={"on_conflict": "user_id"},
            json=body,
            prefer=UPSERT_PREFER,
        )
        return self._single("upsert_preferences", user_id, rows)

    # Energy logs

    async def append_energy_log(
        self,
        user_id: str,
        energy_level: int,
        feeling: str,
        notes: str | None = None,
    ) -> dict[str, Any]:
        rows = await self._request(
            "append_energy_log",
            user_id,
            "POST",
            ENERGY_TABLE,
            json={
                "user_id": user_id,
                "energy_level": energy_level,
                "feeling": feeling,
                "notes": notes,
            },
            prefer=RETURN_REPRESENTATION,
        )
        return self._single("append_energy_log", user_id, rows)

    async def list_energy_logs(self, user_id: str, since_days: int = 7) -> list[dict[str, Any]]:
        start = (datetime.now(timezone.utc) - timedelta(days=since_days)).isoformat()
        return await self._request(
            "list_energy_logs",
            user_id,
            "GET",
            ENERGY_TABLE,
            params={
                "user_id": f"eq.{user_id}",
                "created_at": f"gte.{start}",
                "order": "created_at.desc",
                "select": "*",
            },
        )

    # Pomodoro sessions

    async def append_pomodoro_session(
        self, user_id: str, duration_minutes: int, completed: bool
    ) -> dict[str, Any]:
        rows = await self._request(
            "append_pomodoro_session",
            user_id,
            "POST",
            POMODORO_TABLE,
            json={"user_id": user_id, "duration": duration_minutes, "completed": completed},
            prefer=RETURN_REPRESENTATION,
        )
        return self._single("append_pomodoro_session", user_id, rows)

    # Progress

    async def append_progress(
        self,
        user_id: str,
        content_id: str,
        format_used: str,
        time_spent: int,
        completed: bool = False,
    ) -> dict[str, Any]:
        rows = await self._request(
            "append_progress",
            user_id,
            "POST",
            PROGRESS_TABLE,
            json={
                "user_id": user_id,
                "content_id": content_id,
                "format_used": format_used,
                "time_spent": time_spent,
                "completed": completed,
            },
            prefer=RETURN_REPRESENTATION,
        )
        return self._single("append_progress", user_id, rows)

    async def list_progress(self, user_id: str) -> list[dict[str, Any]]:
        return await self._request(
            "list_progress",
            user_id,
            "GET",
            PROGRESS_TABLE,
            params={"user_id": f"eq.{user_id}", "order": "created_at.desc", "select": "*"},
        )

    # Profiles

    async def upsert_profile(
        self,
        user_id: str,
        email: str | None = None,
        username: str | None = None,
        full_name: str | None = None,
    ) -> dict[str, Any]:
        rows = await self._request(
            "upsert_profile",
            user_id,
            "POST",
            PROFILES_TABLE,
            params={"on_conflict": "id"},
            json={
                "id": user_id,
                "email": email,
                "username": username,
                "full_name": full_name,
                "updated_at": _now(),
            },
            prefer=UPSERT_PREFER,
        )
        return self._single("upsert_profile", user_id, rows)

    async def close(self) -> None:
        await self._client.aclose()
