"""Aggregate statistics over Two-Line Element (TLE) text.

The package decodes three-line TLE sets (name line plus two element lines)
and summarises them: satellite count, oldest launch year, launches per year
and inclination per whole degree.

    >>> from tle_stats import decode_and_aggregate
    >>> print(decode_and_aggregate(text))  # doctest: +SKIP

Loading text from files or URLs lives in :mod:`sources`; the functions here
never touch the filesystem or the network.
"""

from __future__ import annotations

from .errors import EmptyInputError, NoValidRecordsError, ParseError, SourceError
from .pipeline import AnalysisResult, analyze, decode_and_aggregate

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "EmptyInputError",
    "NoValidRecordsError",
    "ParseError",
    "SourceError",
    "analyze",
    "decode_and_aggregate",
]
