"""Command line interface for the tle-stats package."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from sources.text import UrlSource, save_report, source_for

from ..config import load_config
from ..errors import SourceError
from ..logging import log_context
from ..pipeline import analyze
from . import common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tle-stats",
        description="Summarise TLE sets: satellite count, oldest launch year, launches per year and inclination.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="TLE file path, http(s) URL, or '-' for stdin (default: stdin).",
    )
    parser.add_argument("--url", default=None, help="Fetch TLE text from this URL instead of INPUT.")
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Also save the report to this path (default: $TLE_STATS_OUTPUT if set).",
    )
    common.add_shared_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    if ns.url is not None and ns.input is not None:
        parser.error("give either INPUT or --url, not both")

    try:
        config = load_config()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    common.setup_logging(ns, config)
    settings = common.http_settings(ns, config)

    if ns.url is not None:
        source = UrlSource.from_settings(ns.url, settings)
    else:
        source = source_for(ns.input, settings)

    with log_context(source=source.kind, origin=source.origin):
        try:
            text = source.read()
        except SourceError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        result = analyze(text)
        if not result.ok:
            print(f"error: {result.error}", file=sys.stderr)
            return 1

        sys.stdout.write(result.report)
        sys.stdout.flush()

        destination = ns.output or config.output_path
        if destination:
            try:
                save_report(result.report, destination)
            except SourceError as exc:
                print(f"error: {exc}", file=sys.stderr)
                return 2
    return 0


def entrypoint() -> None:
    sys.exit(main())
