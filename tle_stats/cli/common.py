"""Common helpers for the tle-stats CLI."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ..config import AppConfig, HttpSettings
from ..logging import LOG_FORMATS, configure_logging

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def add_shared_arguments(parser: argparse.ArgumentParser) -> None:
    """Register logging and HTTP options."""

    parser.add_argument(
        "--log-level",
        default=None,
        choices=sorted(LOG_LEVELS),
        help="Logging verbosity (default: $TLE_STATS_LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--log-format",
        default="text",
        choices=LOG_FORMATS,
        help="Log line format written to stderr.",
    )
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds.")
    parser.add_argument("--retries", type=int, default=None, help="HTTP retries for --url.")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors.")


def setup_logging(ns: argparse.Namespace, config: AppConfig) -> None:
    """Configure the package logger from CLI flags, falling back to ``config``."""

    if ns.quiet:
        level = logging.WARNING
    else:
        level = LOG_LEVELS.get((ns.log_level or config.log_level).upper(), logging.INFO)
    configure_logging(level=level, fmt=ns.log_format, force=True)


def http_settings(ns: argparse.Namespace, config: AppConfig) -> HttpSettings:
    """Merge ``--timeout``/``--retries`` overrides into the configured HTTP settings."""

    base = config.http
    timeout: Optional[float] = ns.timeout
    retries: Optional[int] = ns.retries
    return HttpSettings(
        timeout=base.timeout if timeout is None else timeout,
        user_agent=base.user_agent,
        retries=base.retries if retries is None else max(0, retries),
        backoff=base.backoff,
    )
