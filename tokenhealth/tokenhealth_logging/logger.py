"""
Structured JSON logging: timestamp, event_type, token, scores.

structlog with ISO timestamps and consistent keys. Every module does
`logger = get_logger(__name__)` and logs snake_case event names with key/value
context. Loggers are resolved lazily on each call, so configure_structlog()
applied later (from Settings, including .env values) reaches module-level
loggers created at import time.

At import, LOG_LEVEL / LOG_FORMAT from the process environment give a working
default; entrypoints (main.py, create_app, the CLI) reconfigure from Settings.

Uses only Python stdlib logging and structlog; no tokenhealth imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog._config import BoundLoggerLazyProxy

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"
ROOT_LOGGER_NAME = "tokenhealth"


def _resolve_level(level: int | str | None) -> int:
    """Level name ("debug", "INFO") or number -> logging level; unknown names -> INFO."""
    if isinstance(level, int):
        return level
    name = (level or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; mirror it into message."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog(log_format: str | None = None, log_level: int | str | None = None) -> None:
    """
    (Re)configure structlog. log_format is "json" or "console"; log_level is a
    level name or number. None falls back to LOG_FORMAT / LOG_LEVEL, then to
    json / INFO. Output goes to the current sys.stdout.
    """
    fmt = (log_format or os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if fmt == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    else:
        processors.append(structlog.processors.JSONRenderer())
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("token_scan_done", token="0xabc...", score_total=72)

    Output (JSON): {"event_type": "token_scan_done", "token": "0xabc...", "score_total": 72,
    "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    # Same lazy proxy structlog.get_logger builds; "logger" cannot be passed
    # as an initial value through structlog.get_logger's keyword arguments.
    return BoundLoggerLazyProxy(None, logger_factory_args=(name,), initial_values={"logger": name})


def bind_token(token: str, name: str = ROOT_LOGGER_NAME) -> Any:
    """Return a logger with token bound to every subsequent call."""
    return get_logger(name).bind(token=token)
