"""
Structured logging for NeuroLearn, structlog wrapping stdlib.

Console output while developing, JSON lines when shipped to a collector.
Every record carries the service name and version; records emitted while
serving a user also carry that user's id (see bind_user).

Settings are resolved per key: explicit argument, then environment
(NEUROLEARN_LOG_LEVEL, NEUROLEARN_LOG_FORMAT), then the `logging`
section of args/neurolearn.yaml, then INFO / console.

Usage:
    from neurolearn.logging_config import setup_logging, get_logger, bind_user
    setup_logging(config=load_config())

    bind_user("alice")
    get_logger(__name__).info("preferences_saved")   # ... user_id=alice
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from typing import Any

import structlog

from neurolearn import __version__

DEFAULT_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _add_service(logger: Any, method_name: str, event_dict: dict) -> dict:
    event_dict.setdefault("service", "neurolearn")
    event_dict.setdefault("version", __version__)
    return event_dict


def _quiet(names: Iterable[str]) -> None:
    """Per-request chatter from HTTP clients and servers only at WARNING."""
    for name in names:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    config: dict[str, Any] | None = None,
) -> None:
    settings = (config or {}).get("logging", {})

    if level is None:
        level = os.environ.get("NEUROLEARN_LOG_LEVEL") or settings.get("level", "INFO")

    if json_output is None:
        log_format = os.environ.get("NEUROLEARN_LOG_FORMAT") or settings.get("format", "console")
        json_output = log_format.lower() == "json"

    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_service,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Plain logging.getLogger records render the same way
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    _quiet(settings.get("quiet_loggers", DEFAULT_QUIET_LOGGERS))


def bind_user(user_id: str) -> None:
    """Attach user_id to every record logged from the current task."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(user_id=user_id)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


__all__ = ["DEFAULT_QUIET_LOGGERS", "bind_user", "get_logger", "setup_logging"]
