"""Persistence backends for preferences, energy logs, timer sessions and progress."""

import logging
import os
from typing import Any

from neurolearn.config import resolve_path
from neurolearn.errors import NeuroLearnError
from neurolearn.storage.base import StorageBackend
from neurolearn.storage.rest import RestBackend
from neurolearn.storage.sqlite import SQLiteBackend

logger = logging.getLogger(__name__)


def get_backend(config: dict[str, Any]) -> StorageBackend:
    """
    Build the storage backend named in config["storage"]["backend"].

    Raises:
        NeuroLearnError: unknown backend, or the hosted backend is selected
            without its URL/key environment variables
    """
    storage = config.get("storage", {})
    backend = storage.get("backend", "sqlite")

    if backend == "sqlite":
        return SQLiteBackend(resolve_path(storage.get("sqlite_path", "data/neurolearn.db")))

    if backend == "rest":
        rest = storage.get("rest", {})
        url_env = rest.get("url_env", "NEUROLEARN_BACKEND_URL")
        key_env = rest.get("key_env", "NEUROLEARN_BACKEND_KEY")
        url = os.environ.get(url_env, "")
        key = os.environ.get(key_env, "")
        if not url or not key:
            raise NeuroLearnError(f"Hosted backend needs {url_env} and {key_env} to be set")
        logger.info(f"Using hosted backend at {url}")
        return RestBackend(url, key, timeout=float(rest.get("timeout_seconds", 10)))

    raise NeuroLearnError(f"Unknown storage backend: {backend}")


__all__ = ["RestBackend", "SQLiteBackend", "StorageBackend", "get_backend"]
