"""Structured logging helpers for tle-stats."""

from __future__ import annotations

import contextlib
import contextvars
import datetime as _dt
import json
import logging
import os
import sys
from typing import Any, Dict, Iterable, Mapping, Optional

_LOGGER_NAME = "tle_stats"
_CONTEXT: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "tle_stats_log_context", default={}
)
_SENSITIVE_KEYS = {"password", "token", "api_key", "apikey"}
_REDACTED = "***REDACTED***"
_TEXT_FORMAT = "%(levelname)s: %(message)s"

LOG_FORMATS = ("json", "text")


def resolve_level(level: Optional[str | int]) -> int:
    """Turn a level name, number or ``None`` (environment) into a logging level."""

    if isinstance(level, int):
        return level
    if level is None:
        level = os.getenv("TLE_STATS_LOG_LEVEL", "INFO")
    try:
        return int(level)
    except (TypeError, ValueError):
        numeric = logging.getLevelName(str(level).upper())
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    _SKIP_FIELDS: Iterable[str] = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _dt.datetime.fromtimestamp(record.created, _dt.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = _CONTEXT.get()
        if context:
            payload["context"] = _redact(context)

        extras = {k: v for k, v in record.__dict__.items() if k not in self._SKIP_FIELDS}
        if extras:
            payload["extra"] = _redact(extras)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=repr, ensure_ascii=False)


def _should_redact(key: Optional[str]) -> bool:
    if not key:
        return False
    key_lower = key.lower()
    return any(token in key_lower for token in _SENSITIVE_KEYS)


def _redact(value: Any, key_hint: Optional[str] = None) -> Any:
    if isinstance(value, Mapping):
        return {k: _redact(v, str(k)) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_redact(item, key_hint) for item in value]
    if _should_redact(key_hint):
        return _REDACTED
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def configure_logging(
    level: Optional[str | int] = None,
    stream: Optional[Any] = None,
    force: bool = False,
    fmt: str = "json",
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    ``fmt`` selects JSON lines (``"json"``) or ``LEVEL: message`` text.
    Repeated calls are no-ops unless ``force`` is set.
    """

    if fmt not in LOG_FORMATS:
        raise ValueError(f"unknown log format: {fmt!r}")

    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers and not force:
        return logger
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children."""

    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


@contextlib.contextmanager
def log_context(**kwargs: Any):
    """Bind metadata to every record emitted inside the block."""

    current = dict(_CONTEXT.get())
    current.update({k: v for k, v in kwargs.items() if v is not None})
    token = _CONTEXT.set(current)
    try:
        yield
    finally:
        _CONTEXT.reset(token)


__all__ = [
    "JSONFormatter",
    "LOG_FORMATS",
    "configure_logging",
    "get_logger",
    "log_context",
    "resolve_level",
]
