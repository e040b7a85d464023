"""Command line interface for bulk importing pasted contact text."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import ImporterSettings, load_configuration, settings_from_config
from .ingestion.exporters import export_records, export_skipped
from .ingestion.lines import count_nonblank_lines
from .io import load_book, save_book
from .orchestrator import summarize
from .store import ContactBook


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Import contacts from pasted text, one 'name, email, phone' entry per line",
    )
    parser.add_argument("input", help="Path to a text file with one contact per line, or '-' for stdin")
    parser.add_argument(
        "--store",
        default=None,
        help="JSON file holding the contact book; accepted records are merged into it",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional importer configuration file (YAML or JSON)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Maximum number of contacts the book may hold",
    )
    parser.add_argument(
        "--export",
        default=None,
        help="Write the accepted records to a CSV, TSV or Excel file",
    )
    parser.add_argument(
        "--skipped",
        default=None,
        help="Write the skipped-line diagnostics to a CSV, TSV or Excel file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8-sig")


def _resolve_settings(args: argparse.Namespace) -> ImporterSettings:
    settings = settings_from_config(load_configuration(args.config)) if args.config else ImporterSettings()
    if args.capacity is not None:
        if args.capacity < 0:
            raise SystemExit("--capacity must be zero or greater")
        settings.capacity = args.capacity
    if args.store:
        settings.store_path = Path(args.store)
    return settings


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    settings = _resolve_settings(args)
    if settings.store_path:
        book = load_book(settings.store_path, capacity=settings.capacity)
    else:
        book = ContactBook(capacity=settings.capacity)

    text = _read_input(args.input)
    logging.info("Lines: %s, remaining slots: %s", count_nonblank_lines(text), book.remaining_slots)
    report = book.bulk_import(text)
    summary = summarize(report)
    print(summary.text)
    for message in report.skip_messages():
        print(f"  {message}")

    if settings.store_path and report.accepted:
        save_book(settings.store_path, book)
        logging.info("Contact book written to %s", settings.store_path.resolve())
    if args.export:
        export_records(report.accepted, args.export)
    if args.skipped:
        export_skipped(report, args.skipped)

    return 0 if summary.ok else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
