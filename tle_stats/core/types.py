"""Shared dataclasses for the decoder and aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class RawFrame:
    """One name line plus the two element lines that follow it."""

    offset: int
    name: str
    line1: str
    line2: str


@dataclass(frozen=True)
class SatelliteRecord:
    """Decoded fields of a retained frame."""

    launch_year: int
    inclination_degrees: Optional[int] = None
    name: str = ""


@dataclass(frozen=True)
class DecodeResult:
    """Records produced by a decode pass.

    ``frame_count`` is the number of complete frames the text was split into.
    The ``retained_count`` property gives how many survived the length checks.
    """

    records: Tuple[SatelliteRecord, ...]
    frame_count: int

    @property
    def retained_count(self) -> int:
        return len(self.records)


@dataclass
class AggregateReport:
    """Running totals for one decode pass; keys are sorted only when rendered."""

    total_satellites: int = 0
    oldest_year: Optional[int] = None
    year_counts: Dict[int, int] = field(default_factory=dict)
    inclination_counts: Dict[int, int] = field(default_factory=dict)


__all__ = ["AggregateReport", "DecodeResult", "RawFrame", "SatelliteRecord"]
