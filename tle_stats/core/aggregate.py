"""Accumulate decoded records into histograms and render the text report."""

from __future__ import annotations

from typing import Iterable, List

from ..errors import NoValidRecordsError
from ..logging import get_logger
from .types import AggregateReport, SatelliteRecord

DEGREE_SIGN = "°"

LOGGER = get_logger("core.aggregate")


def aggregate(records: Iterable[SatelliteRecord], total_frames: int) -> AggregateReport:
    """Build an :class:`AggregateReport` from ``records``.

    ``total_frames`` is the number of retained frames reported by the decoder.
    Raises :class:`NoValidRecordsError` when there is nothing to aggregate.
    """

    report = AggregateReport(total_satellites=total_frames)
    seen = 0
    for record in records:
        seen += 1
        year = record.launch_year
        report.year_counts[year] = report.year_counts.get(year, 0) + 1
        if report.oldest_year is None or year < report.oldest_year:
            report.oldest_year = year
        degrees = record.inclination_degrees
        if degrees is not None:
            report.inclination_counts[degrees] = report.inclination_counts.get(degrees, 0) + 1

    if seen == 0:
        raise NoValidRecordsError("No valid satellite data found.")

    LOGGER.debug(
        "aggregate_complete",
        extra={
            "total": report.total_satellites,
            "years": len(report.year_counts),
            "inclinations": len(report.inclination_counts),
        },
    )
    return report


def render(report: AggregateReport) -> str:
    """Render ``report`` as plain text with ascending keys in each section."""

    parts: List[str] = [
        f"Total satellites: {report.total_satellites}\n\n",
        f"Oldest launch year: {report.oldest_year}\n\n",
        "Distribution by year:\n",
    ]
    for year in sorted(report.year_counts):
        parts.append(f"{year}: {report.year_counts[year]}\n")

    parts.append("\nDistribution by incline:\n")
    for degrees in sorted(report.inclination_counts):
        parts.append(f"{degrees}{DEGREE_SIGN}: {report.inclination_counts[degrees]}\n")
    return "".join(parts)


__all__ = ["DEGREE_SIGN", "aggregate", "render"]
