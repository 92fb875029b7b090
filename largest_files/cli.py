#!/usr/bin/env python
"""
Main CLI entry point for the largest-files tool.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from . import report, ui
from .commands import find_largest_files
from .config import ConfigError, load_settings
from .scanner import ScanError
from .size_utils import parse_size_to_bytes


DEFAULT_DIRECTORY = "./"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="largest-files",
        description="Find the largest files under a directory.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to scan (defaults to the current directory).",
    )
    parser.add_argument(
        "count",
        nargs="?",
        default=None,
        help="Number of files to report (defaults to the configured count, 10 unless changed).",
    )
    parser.add_argument(
        "-m",
        "--min-size",
        default=None,
        help="Ignore files smaller than this, e.g. 500M or 2GiB.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=("table", "plain", "json", "md"),
        default="table",
        help="Output format.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config file.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging.")
    return parser


def parse_count(raw: Optional[str], default: int) -> int:
    """Positive integer from `raw`, or `default` when missing or unparsable."""
    if raw is None:
        ui.log_info(f"No number of files provided. Defaulting to {default}.")
        return default
    try:
        value = int(raw)
    except ValueError:
        ui.log_warning(f"Invalid number of files '{raw}'. Defaulting to {default}.")
        return default
    if value < 1:
        ui.log_warning(f"Number of files must be positive, got {value}. Defaulting to {default}.")
        return default
    return value


def _emit(args: argparse.Namespace, root: str, result) -> None:
    records = result.records
    if args.format == "json":
        data, _ = report.build_report(records, result.stats, root)
        print(report.dumps(data))
    elif args.format == "md":
        _, md = report.build_report(records, result.stats, root)
        print(md)
    elif args.format == "plain":
        if records:
            print(report.format_listing(records))
    else:
        if records:
            report.print_table(records, title=f"Largest files under {root}")

    if not records:
        ui.log_warning(f"No files found under {root}.")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s: %(message)s",
    )
    ui.set_verbose(args.verbose)

    try:
        settings = load_settings(args.config)
    except (ConfigError, OSError) as e:
        ui.log_error(str(e))
        return 1

    directory = args.directory
    if directory is None:
        ui.log_info("No directory provided. Defaulting to the current working directory.")
        directory = DEFAULT_DIRECTORY
    root = str(Path(directory).expanduser())
    count = parse_count(args.count, settings.count)

    try:
        min_size = parse_size_to_bytes(args.min_size)
    except ValueError as e:
        ui.log_error(str(e))
        return 1
    if min_size is None:
        min_size = settings.min_size

    try:
        with ui.section(f"Scanning {root}"):
            result = find_largest_files(root, count, min_size=min_size)
    except ScanError as e:
        ui.log_error(str(e))
        return 1

    _emit(args, root, result)

    stats = result.stats
    if stats.issues:
        ui.log_warning(
            f"Skipped {stats.skipped_dirs} unreadable directories and "
            f"{stats.skipped_entries} unreadable entries."
        )
        for issue in stats.issues:
            ui.log_info(f"{issue.kind}: {issue.path} ({issue.reason})")
    ui.log_info(f"Scanned {stats.files_seen} files in {stats.dirs_seen} directories in {stats.elapsed:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
