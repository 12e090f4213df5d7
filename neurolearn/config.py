"""
Configuration loader.

Reads args/neurolearn.yaml (or the file named by NEUROLEARN_CONFIG) and
deep-merges it over the built-in defaults, so a missing file or a
partial file still yields a complete configuration.

Usage:
    from neurolearn.config import load_config
    config = load_config()
    config["pomodoro"]["focus_minutes"]  # 25
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from neurolearn import CONFIG_PATH, PROJECT_ROOT

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {
        "backend": "sqlite",
        "sqlite_path": "data/neurolearn.db",
        "rest": {
            "url_env": "NEUROLEARN_BACKEND_URL",
            "key_env": "NEUROLEARN_BACKEND_KEY",
            "timeout_seconds": 10,
        },
    },
    "pomodoro": {
        "focus_minutes": 25,
        "break_minutes": 5,
        "tick_seconds": 1,
    },
    "energy": {
        "history_days": 7,
    },
    "dashboard": {
        "cors_origins": ["http://localhost:3000", "http://127.0.0.1:3000"],
    },
    "logging": {
        "level": "INFO",
        "format": "console",
        "quiet_loggers": ["httpx", "httpcore", "uvicorn.access"],
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_config_path() -> Path:
    """Return the active config path, honouring NEUROLEARN_CONFIG."""
    override = os.environ.get("NEUROLEARN_CONFIG")
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML, falling back to defaults."""
    config_path = path or get_config_path()
    defaults = copy.deepcopy(DEFAULT_CONFIG)

    if not config_path.exists():
        return defaults

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Invalid config file {config_path}, using defaults: {e}")
        return defaults

    return _deep_merge(defaults, raw.get("neurolearn", {}) or {})


def resolve_path(value: str | Path) -> Path:
    """Resolve a config path relative to the project root."""
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path


__all__ = ["DEFAULT_CONFIG", "get_config_path", "load_config", "resolve_path"]
