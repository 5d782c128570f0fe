"""Application configuration loader for tle_stats."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, TypeVar

__all__ = [
    "AppConfig",
    "HttpSettings",
    "DEFAULT_USER_AGENT",
    "load_config",
    "redact_secret",
]

DEFAULT_USER_AGENT = "TLE-Stats/1.0 (+https://example.local) Python-urllib"

T = TypeVar("T")


@dataclass(frozen=True)
class HttpSettings:
    """Options for the URL text source."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    retries: int = 0
    backoff: float = 0.5


@dataclass(frozen=True)
class AppConfig:
    """Container for derived application configuration."""

    log_level: str
    http: HttpSettings
    output_path: Optional[Path] = None


def redact_secret(value: Optional[str], keep: int = 4) -> str:
    """Redact a secret value for safe logging."""

    if not value:
        return "<redacted>"
    keep = max(0, keep)
    if len(value) <= keep:
        return "*" * len(value)
    return f"{value[:keep]}{'*' * 4}"


def _read(env: Mapping[str, str], key: str, cast: Callable[[str], T], default: T) -> T:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"invalid value for {key}: {raw!r}") from exc


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Load configuration from environment variables."""

    env_map: Mapping[str, str] = os.environ if env is None else env

    http = HttpSettings(
        timeout=_read(env_map, "TLE_STATS_HTTP_TIMEOUT", float, 10.0),
        user_agent=env_map.get("TLE_STATS_USER_AGENT") or DEFAULT_USER_AGENT,
        retries=max(0, _read(env_map, "TLE_STATS_HTTP_RETRIES", int, 0)),
        backoff=max(0.0, _read(env_map, "TLE_STATS_HTTP_BACKOFF", float, 0.5)),
    )
    output = env_map.get("TLE_STATS_OUTPUT")

    return AppConfig(
        log_level=(env_map.get("TLE_STATS_LOG_LEVEL") or "INFO").upper(),
        http=http,
        output_path=Path(output).expanduser() if output else None,
    )
