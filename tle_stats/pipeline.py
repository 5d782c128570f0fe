"""Entry points tying the decoder and aggregator together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core import aggregate, decode, render
from .errors import ParseError
from .logging import get_logger

LOGGER = get_logger("pipeline")


def decode_and_aggregate(text: str) -> str:
    """Decode ``text`` and return the rendered statistics report.

    Raises :class:`~tle_stats.errors.EmptyInputError` if the text has no
    complete frame and :class:`~tle_stats.errors.NoValidRecordsError` if no
    frame survives decoding.
    """

    result = decode(text)
    report = aggregate(result.records, result.retained_count)
    return render(report)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome handed to a report sink: either a report or an error."""

    report: Optional[str] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        return "ok" if self.error is None else self.error.kind


def analyze(text: str) -> AnalysisResult:
    """Like :func:`decode_and_aggregate` but returns failures instead of raising."""

    try:
        report = decode_and_aggregate(text)
    except ParseError as exc:
        LOGGER.debug("analysis_failed", extra={"kind": exc.kind, "reason": exc.message})
        return AnalysisResult(error=exc)
    return AnalysisResult(report=report)


__all__ = ["AnalysisResult", "analyze", "decode_and_aggregate"]
