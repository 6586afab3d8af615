from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from typing import Optional, Sequence

from .client import DEFAULT_MAX_PAGES, DEFAULT_PAGE_DELAY
from .http_utils import DEFAULT_TIMEOUT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wattpad",
        description="Read chapters, list story parts and search stories on Wattpad.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds for each request (default: {DEFAULT_TIMEOUT:g}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of plain text.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    read_parser = commands.add_parser("read", help="Print the text of a chapter.")
    read_parser.add_argument(
        "url",
        help="Chapter URL (e.g. https://www.wattpad.com/123456-chapter-one).",
    )
    read_parser.add_argument(
        "--max-pages",
        type=int,
        default=DEFAULT_MAX_PAGES,
        help=f"Maximum number of chapter pages to fetch (default: {DEFAULT_MAX_PAGES}).",
    )
    read_parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_PAGE_DELAY,
        help=f"Delay (seconds) between page requests (default: {DEFAULT_PAGE_DELAY:g}).",
    )
    read_parser.add_argument(
        "--single",
        action="store_true",
        help="Only fetch the given URL instead of following /page/N.",
    )

    parts_parser = commands.add_parser("parts", help="List the parts of a story.")
    parts_parser.add_argument(
        "url",
        help="Story URL (e.g. https://www.wattpad.com/story/123456-title).",
    )

    search_parser = commands.add_parser("search", help="Search for stories.")
    search_parser.add_argument("query", help="Free-text search query.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    if args.timeout <= 0:
        raise SystemExit("Timeout must be a positive number.")
    if args.command == "read":
        if args.max_pages <= 0:
            raise SystemExit("Max pages must be a positive integer.")
        if args.delay < 0:
            raise SystemExit("Delay must be zero or greater.")


def format_records(records: Sequence, as_json: bool) -> str:
    if as_json:
        return json.dumps([asdict(record) for record in records], indent=2, ensure_ascii=False)

    blocks: list[str] = []
    for record in records:
        fields = asdict(record)
        width = max(len(name) for name in fields)
        blocks.append("\n".join(f"{name.ljust(width)}  {value}" for name, value in fields.items()))
    return "\n\n".join(blocks)
