#!/usr/bin/env python3
"""
Command-line entry point: build an insight report from an exported JSON file.

Usage:
    resilience-insights export.json
    resilience-insights export.json --json
    resilience-insights export.json --log-level DEBUG

The file must hold an object with the three record lists, keyed either in
the dashboard's camelCase (moodEntries, journalEntries, thoughtRecords) or in
snake_case. Missing lists are treated as empty.

Exit codes:
    0  report printed
    2  file missing, unreadable, or not the expected JSON shape
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from resilience import __version__
from resilience.errors import ResilienceError
from resilience.observability.logging import get_logger, set_log_level

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2

STREAM_KEYS: dict[str, tuple[str, ...]] = {
    "mood_entries": ("moodEntries", "mood_entries"),
    "journal_entries": ("journalEntries", "journal_entries"),
    "thought_records": ("thoughtRecords", "thought_records"),
}


class ExportFormatError(ResilienceError):
    """Raised when an export file cannot be turned into record streams."""

    pass


def load_export(path: Path) -> dict[str, list[Any]]:
    """
    Read an export file into the three record lists.

    Raises:
        ExportFormatError: unreadable file, invalid JSON, or wrong shape
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExportFormatError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ExportFormatError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ExportFormatError(f"{path} must contain a JSON object, got {type(data).__name__}")

    streams: dict[str, list[Any]] = {}
    for stream, keys in STREAM_KEYS.items():
        value = next((data[key] for key in keys if key in data), [])
        if value is None:
            value = []
        if not isinstance(value, list):
            raise ExportFormatError(f"{keys[0]} must be a list, got {type(value).__name__}")
        streams[stream] = value
    return streams


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resilience-insights",
        description="Correlate mood, journal and thought-record exports and print insights",
    )
    parser.add_argument("path", type=Path, help="JSON export file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full dashboard payload instead of insight lines",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: RESILIENCE_LOG_LEVEL or INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)

    try:
        streams = load_export(args.path)
    except ExportFormatError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # Imported here so --help and --version never build the taxonomy
    from resilience.insights.service import build_report

    report = build_report(
        streams["mood_entries"],
        streams["journal_entries"],
        streams["thought_records"],
    )

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        for line in report.insight_texts:
            print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
