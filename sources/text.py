"""Obtain raw TLE text from files, stdin or HTTP, and save rendered reports.

Each source only produces a string.  Paths, URLs and transport errors stop
here; the statistics core receives nothing but the text.
"""
from __future__ import annotations

import dataclasses
import random
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from tle_stats.config import DEFAULT_USER_AGENT, HttpSettings, redact_secret
from tle_stats.errors import SourceError
from tle_stats.logging import get_logger

LOGGER = get_logger("sources")

DEFAULT_TIMEOUT = 10.0
_URL_SCHEMES = ("http://", "https://")


def _display_url(url: str) -> str:
    """Return ``url`` with query parameter values masked."""

    parts = urllib.parse.urlsplit(url)
    if not parts.query:
        return url
    pairs = urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    masked = "&".join(f"{key}={redact_secret(value)}" for key, value in pairs)
    return urllib.parse.urlunsplit(parts._replace(query=masked))


@dataclasses.dataclass
class FileSource:
    """Read TLE text from a local file."""

    path: Path
    kind: str = dataclasses.field(default="file", init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path).expanduser()

    @property
    def origin(self) -> str:
        return str(self.path)

    def read(self) -> str:
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            raise SourceError(f"Unable to open file: {self.path}") from exc
        LOGGER.info("[FILE] Loaded from: %s", self.path)
        return data.decode("utf-8", errors="replace")


@dataclasses.dataclass
class StdinSource:
    """Read TLE text from a stream, standard input by default."""

    stream: Optional[TextIO] = None
    kind: str = dataclasses.field(default="stdin", init=False)

    @property
    def origin(self) -> str:
        return "-"

    def read(self) -> str:
        return (self.stream or sys.stdin).read()


@dataclasses.dataclass
class UrlSource:
    """Fetch TLE text over HTTP(S) with bounded retries and exponential backoff."""

    url: str
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    retries: int = 0
    backoff: float = 0.5
    opener: Optional[Callable[[urllib.request.Request, float], bytes]] = None
    sleeper: Callable[[float], None] = time.sleep
    jitter: Callable[[], float] = lambda: random.uniform(0, 0.125)
    kind: str = dataclasses.field(default="url", init=False)

    @classmethod
    def from_settings(cls, url: str, settings: HttpSettings, **kwargs) -> "UrlSource":
        return cls(
            url=url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            retries=settings.retries,
            backoff=settings.backoff,
            **kwargs,
        )

    @property
    def origin(self) -> str:
        return _display_url(self.url)

    def _build_request(self) -> urllib.request.Request:
        headers = {"User-Agent": self.user_agent}
        return urllib.request.Request(self.url, headers=headers, method="GET")

    def _default_opener(self, request: urllib.request.Request, timeout: float) -> bytes:
        with urllib.request.urlopen(request, timeout=timeout) as resp:
            status = getattr(resp, "status", None) or resp.getcode()
            if status != 200:
                raise SourceError(f"Failed to fetch: HTTP {status}")
            return resp.read()

    def read(self) -> str:
        if not self.url or not self.url.strip():
            raise SourceError("URL input cancelled.")

        LOGGER.info("[URL] Fetching data from: %s", self.origin)
        request = self._build_request()
        opener = self.opener or self._default_opener
        retries = max(0, self.retries)
        attempt = 0
        while True:
            try:
                payload = opener(request, self.timeout)
            except (SourceError, urllib.error.URLError, OSError) as exc:
                if attempt >= retries:
                    if isinstance(exc, SourceError):
                        raise
                    raise SourceError(f"Failed to fetch: {exc}") from exc
                delay = self.backoff * (2 ** attempt) + self.jitter()
                LOGGER.debug("fetch_retry", extra={"attempt": attempt + 1, "delay": delay})
                self.sleeper(delay)
                attempt += 1
                continue
            LOGGER.info("[URL] Successfully loaded data.")
            return payload.decode("utf-8", errors="replace")


TextSource = Union[FileSource, StdinSource, UrlSource]


def source_for(target: Optional[str], settings: Optional[HttpSettings] = None) -> TextSource:
    """Choose a source for ``target``: a URL, a path, or ``-``/``None`` for stdin."""

    if target is None or target == "-":
        return StdinSource()
    if target.lower().startswith(_URL_SCHEMES):
        return UrlSource.from_settings(target, settings or HttpSettings())
    return FileSource(Path(target))


def save_report(report: str, path: Union[str, Path]) -> Path:
    """Write ``report`` to ``path`` as UTF-8 and return the resolved path."""

    destination = Path(path).expanduser()
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(report, encoding="utf-8")
    except OSError as exc:
        raise SourceError(f"Unable to save file: {destination}") from exc
    LOGGER.info("[SUCCESS] Output saved to: %s", destination)
    return destination


__all__ = [
    "DEFAULT_TIMEOUT",
    "FileSource",
    "StdinSource",
    "TextSource",
    "UrlSource",
    "save_report",
    "source_for",
]
