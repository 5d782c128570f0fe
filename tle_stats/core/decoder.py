"""Decode raw TLE text into :class:`SatelliteRecord` instances.

The input is treated as a sequence of fixed three-line frames (name line and
two element lines).  Blank lines are dropped before framing.  Only two fields
are read from the element lines, both at fixed columns:

* line 1, columns 9-10: the two-digit launch year of the international
  designator, expanded to four digits with a pivot at 57;
* line 2, columns 8-15: the inclination in degrees.

Checksums, line prefixes and catalogue numbers are deliberately left alone.
"""

from __future__ import annotations

import math
import re
from typing import Iterator, List, Optional

from ..errors import EmptyInputError
from ..logging import get_logger
from .types import DecodeResult, RawFrame, SatelliteRecord

FRAME_SIZE = 3
MIN_LINE1_LENGTH = 20
MIN_LINE2_LENGTH = 16
EPOCH_PIVOT = 57
BASE_YEAR_2000 = 2000
BASE_YEAR_1900 = 1900

EPOCH_SLICE = slice(9, 11)
INCLINATION_SLICE = slice(8, 16)

_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

LOGGER = get_logger("core.decoder")


def split_lines(text: str) -> List[str]:
    """Return the non-blank lines of ``text``.

    Only ``\\n`` separates lines; one trailing ``\\r`` is dropped from each so
    CRLF input measures the same as LF input.
    """

    lines = []
    for raw in text.split("\n"):
        line = raw[:-1] if raw.endswith("\r") else raw
        if line.strip():
            lines.append(line)
    return lines


def split_frames(lines: List[str]) -> Iterator[RawFrame]:
    """Yield complete frames; an incomplete trailing frame is dropped."""

    for offset in range(0, len(lines), FRAME_SIZE):
        if offset + 2 >= len(lines):
            LOGGER.debug("frame_skipped", extra={"offset": offset, "reason": "incomplete"})
            continue
        yield RawFrame(
            offset=offset,
            name=lines[offset],
            line1=lines[offset + 1],
            line2=lines[offset + 2],
        )


def launch_year(epoch_code: int) -> int:
    """Expand a two-digit year code to four digits."""

    if epoch_code < EPOCH_PIVOT:
        return BASE_YEAR_2000 + epoch_code
    return BASE_YEAR_1900 + epoch_code


def _parse_epoch_code(field: str) -> int:
    # Non-numeric designators count as code 0.
    try:
        return int(field)
    except ValueError:
        return 0


def parse_inclination(field: str) -> Optional[float]:
    """Parse the inclination column, returning ``None`` when it is not a number."""

    candidate = field.strip()
    if not _FLOAT_RE.match(candidate):
        return None
    value = float(candidate)
    if not math.isfinite(value):
        return None
    return value


def decode_frame(frame: RawFrame) -> Optional[SatelliteRecord]:
    """Decode a single frame, or return ``None`` if its lines are too short."""

    if len(frame.line1) < MIN_LINE1_LENGTH or len(frame.line2) < MIN_LINE2_LENGTH:
        LOGGER.debug("frame_skipped", extra={"offset": frame.offset, "reason": "short_line"})
        return None

    year = launch_year(_parse_epoch_code(frame.line1[EPOCH_SLICE]))
    inclination = parse_inclination(frame.line2[INCLINATION_SLICE])
    degrees = None if inclination is None else int(inclination)
    if degrees is None:
        LOGGER.debug("inclination_unparsed", extra={"offset": frame.offset})
    return SatelliteRecord(launch_year=year, inclination_degrees=degrees, name=frame.name.strip())


def decode(text: str) -> DecodeResult:
    """Split ``text`` into frames and decode every frame that passes the checks.

    Raises :class:`EmptyInputError` when the text holds fewer than three
    non-blank lines.
    """

    if not text or not text.strip():
        raise EmptyInputError("No valid data to process.")

    lines = split_lines(text)
    frame_count = len(lines) // FRAME_SIZE
    if frame_count == 0:
        raise EmptyInputError("No valid satellite data found.")

    records = []
    for frame in split_frames(lines):
        record = decode_frame(frame)
        if record is not None:
            records.append(record)

    LOGGER.debug(
        "decode_complete",
        extra={"frames": frame_count, "retained": len(records), "lines": len(lines)},
    )
    return DecodeResult(records=tuple(records), frame_count=frame_count)


__all__ = [
    "EPOCH_PIVOT",
    "FRAME_SIZE",
    "MIN_LINE1_LENGTH",
    "MIN_LINE2_LENGTH",
    "decode",
    "decode_frame",
    "launch_year",
    "parse_inclination",
    "split_frames",
    "split_lines",
]
