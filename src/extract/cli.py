#!/usr/bin/env python3
"""CLI interface for extract module: list highlights without touching the database."""

import argparse
import sys
from datetime import date

from rich.markup import escape

from common.logger import console, error, setup_logging

from .config import Config, add_common_arguments
from .date_range import ConfigError
from .main import extract_highlights
from .models import BookHighlights, ExtractionSummary


def print_highlights(books: list[BookHighlights]) -> None:
    """Print highlights grouped by book."""
    for entry in books:
        console.print(f"\n[bold]{escape(entry.book.title)}[/bold] by {escape(entry.book.author)}")
        for highlight in entry.highlights:
            location = f"p. {highlight.page}"
            if highlight.chapter:
                location = f"{highlight.chapter}, {location}"
            console.print(
                f"  [dim]{highlight.datetime:%Y-%m-%d %H:%M}[/dim] ({escape(location)})",
                highlight=False,
            )
            console.print(f"    {highlight.text}", markup=False, highlight=False)


def cmd_extract(args: argparse.Namespace, today: date | None = None) -> int:
    """Extract highlights in range and print them.

    Args:
        args: Parsed command-line arguments
        today: Date of the run (defaults to the current date)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        config = Config.from_args(args, today or date.today())
    except ConfigError as e:
        error(str(e))
        return 1

    console.print(f"Books path: {config.books_path}")
    console.print(f"Date range: {config.date_range}")

    summary = ExtractionSummary()
    books = extract_highlights(config.books_path, config.date_range, summary)

    if not books:
        console.print("No highlights in range.")
        return 0

    print_highlights(books)
    console.print(
        f"\n{summary.highlights_in_range} highlight(s) from "
        f"{summary.books_with_highlights} book(s)"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="koreader-extract",
        description="List KOReader highlights in a date range (no database writes)",
    )
    add_common_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None)
    return cmd_extract(args)


if __name__ == "__main__":
    sys.exit(main())
