"""Command-line entry point for checking and searching the data file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog

from core.config import load_config
from core.exceptions import ConfigValidationError, TrackerError
from core.logging import configure_logging
from model.address_book import AddressBook
from model.sample_data import sample_address_book
from storage.store import JsonAddressBookStorage

logger = structlog.get_logger()


def _load(storage: JsonAddressBookStorage) -> AddressBook:
    book = storage.read_address_book()
    return book if book is not None else AddressBook()


def cmd_check(storage: JsonAddressBookStorage, args: argparse.Namespace) -> int:
    book = _load(storage)
    print(
        f"{storage.file_path}: {len(book.persons)} applicants, "
        f"{len(book.interviews)} interviews, {len(book.tasks)} tasks"
    )
    return 0


def cmd_find(storage: JsonAddressBookStorage, args: argparse.Namespace) -> int:
    book = _load(storage)
    matches = book.find_persons(args.keywords)
    for index, person in enumerate(matches, start=1):
        print(f"{index}. {person}")
    print(f"{len(matches)} applicants listed")
    return 0


def cmd_sample(storage: JsonAddressBookStorage, args: argparse.Namespace) -> int:
    target = JsonAddressBookStorage(args.path) if args.path else storage
    target.save_address_book(sample_address_book())
    print(f"Sample data written to {target.file_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tracker", description=__doc__)
    parser.add_argument("--data-file", type=Path, help="Address book JSON file")
    parser.add_argument("--preferences", type=Path, help="preferences.yaml path")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Load and validate the data file")
    check.set_defaults(func=cmd_check)

    find = sub.add_parser("find", help="List applicants matching any keyword")
    find.add_argument("keywords", nargs="+", help="e.g. alex jobid:SWE123 progress:offer")
    find.set_defaults(func=cmd_find)

    sample = sub.add_parser("sample", help="Write a sample address book")
    sample.add_argument("path", nargs="?", type=Path)
    sample.set_defaults(func=cmd_sample)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the tracker CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings, prefs = load_config(preferences_path=args.preferences)
    except ConfigValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level, settings.json_logs)
    data_file = args.data_file or settings.resolve_data_file(prefs)
    storage = JsonAddressBookStorage(data_file)

    try:
        return args.func(storage, args)
    except TrackerError as e:
        logger.error("Address book error", error=str(e), path=str(data_file))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
