"""Exception types raised by the TLE statistics pipeline."""

from __future__ import annotations

__all__ = [
    "ParseError",
    "EmptyInputError",
    "NoValidRecordsError",
    "SourceError",
]


class ParseError(ValueError):
    """Base class for failures that prevent a report from being produced."""

    kind = "parse_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInputError(ParseError):
    """Raised when the input text contains no complete three-line frame."""

    kind = "empty_input"


class NoValidRecordsError(ParseError):
    """Raised when frames exist but every one of them was rejected."""

    kind = "no_valid_records"


class SourceError(RuntimeError):
    """Raised when a text source or report sink cannot do its job."""
