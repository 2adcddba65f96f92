"""CLI for syncing KOReader highlights into the database.

Database backend is controlled by the DATABASE_TYPE environment variable:
  - SQLite (default): --database-path / DATABASE_PATH is the database file
  - PostgreSQL (DATABASE_TYPE=postgresql): POSTGRES_* variables are used
"""

import argparse
import sys
from datetime import date

from common.logger import error, get_logger, progress, setup_logging, success, warning
from extract.config import Config, add_common_arguments
from extract.date_range import ConfigError
from extract.main import extract_highlights
from extract.models import ExtractionSummary
from load.db import DatabaseError, config_from_env, create_database
from load.load_data import count_highlights, load_books

logger = get_logger(__name__)


def cmd_sync(args: argparse.Namespace, today: date | None = None) -> int:
    """Extract highlights in range and store the new ones.

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

    progress(f"Books path: {config.books_path}")
    db_config = config_from_env(config.database_path)
    progress(f"Database: {db_config.describe()}")
    progress(f"Date range: {config.date_range}")

    summary = ExtractionSummary()
    books = extract_highlights(config.books_path, config.date_range, summary)

    if summary.files_failed:
        warning(f"{summary.files_failed} metadata file(s) could not be parsed")

    if not books:
        progress("No highlights in range.")
        return 0

    try:
        with create_database(db_config) as adapter:
            adapter.create_schema()
            stats = load_books(adapter, books)
            total = count_highlights(adapter)
    except DatabaseError as e:
        error(str(e))
        return 1

    success(
        f"{stats.inserted} new highlight(s), {stats.ignored} duplicate(s) ignored "
        f"from {summary.books_with_highlights} book(s)"
    )
    logger.info(f"Database now holds [bold]{total}[/bold] highlight(s)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="koreader-highlights",
        description="Extract highlights from KOReader metadata files into a database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Without --from/--to/--last, highlights from the last Sunday up to\n"
            "yesterday are imported."
        ),
    )
    add_common_arguments(parser)
    parser.add_argument(
        "--database-path",
        "-d",
        default=None,
        help="Path to the SQLite database file (env: DATABASE_PATH)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None)
    return cmd_sync(args)


if __name__ == "__main__":
    sys.exit(main())
