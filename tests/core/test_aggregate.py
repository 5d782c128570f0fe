from __future__ import annotations

import pytest

from tle_stats.core import AggregateReport, SatelliteRecord, aggregate, render
from tle_stats.errors import NoValidRecordsError


def _records(*pairs):
    return [SatelliteRecord(launch_year=year, inclination_degrees=deg) for year, deg in pairs]


def test_aggregate_counts_and_oldest_year() -> None:
    records = _records((1998, 51), (1958, 34), (1998, 51), (2021, None))
    report = aggregate(records, total_frames=len(records))
    assert report.total_satellites == 4
    assert report.oldest_year == 1958
    assert report.year_counts == {1998: 2, 1958: 1, 2021: 1}
    assert report.inclination_counts == {51: 2, 34: 1}


def test_aggregate_accepts_generators() -> None:
    report = aggregate((r for r in _records((2000, 0))), total_frames=1)
    assert report.oldest_year == 2000
    assert report.inclination_counts == {0: 1}


def test_aggregate_without_records_fails() -> None:
    with pytest.raises(NoValidRecordsError) as excinfo:
        aggregate([], total_frames=0)
    assert excinfo.value.kind == "no_valid_records"


def test_render_orders_keys_ascending() -> None:
    report = AggregateReport(
        total_satellites=3,
        oldest_year=1961,
        year_counts={2020: 1, 1961: 1, 1999: 1},
        inclination_counts={98: 1, -3: 1, 7: 1},
    )
    assert render(report) == (
        "Total satellites: 3\n"
        "\n"
        "Oldest launch year: 1961\n"
        "\n"
        "Distribution by year:\n"
        "1961: 1\n"
        "1999: 1\n"
        "2020: 1\n"
        "\n"
        "Distribution by incline:\n"
        "-3°: 1\n"
        "7°: 1\n"
        "98°: 1\n"
    )


def test_render_with_empty_inclination_section() -> None:
    report = aggregate(_records((1957, None)), total_frames=1)
    assert render(report).endswith("Distribution by year:\n1957: 1\n\nDistribution by incline:\n")
