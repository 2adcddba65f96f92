"""Run configuration assembled from CLI arguments, environment and defaults."""

import argparse
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from common.env import env

from .date_range import DateRange, resolve_date_range


@dataclass(frozen=True)
class Config:
    """Everything a highlights run needs to know."""

    books_path: Path
    database_path: Path
    date_range: DateRange

    @classmethod
    def from_args(cls, args: argparse.Namespace, today: date) -> "Config":
        """Build a Config from parsed arguments.

        CLI values take precedence over environment variables (and .env),
        which take precedence over built-in defaults.

        Raises:
            ConfigError: If the date options are invalid or conflicting
        """
        date_range = resolve_date_range(args.from_date, args.to_date, args.last, today)

        books_path = Path(args.books_path) if args.books_path else env.books_path()
        database_path = getattr(args, "database_path", None)
        database_path = Path(database_path) if database_path else env.database_path()

        return cls(books_path=books_path, database_path=database_path, date_range=date_range)


def positive_int(value: str) -> int:
    """argparse type for --last."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected a whole number of days, got '{value}'") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected at least 1 day, got {number}")
    return number


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the path and date options shared by the CLIs."""
    parser.add_argument(
        "--books-path",
        "-b",
        default=None,
        help="Path to the books directory containing .sdr folders (env: BOOKS_PATH)",
    )
    parser.add_argument(
        "--from",
        dest="from_date",
        default=None,
        metavar="YYYY-MM-DD",
        help="Start date (inclusive)",
    )
    parser.add_argument(
        "--to",
        dest="to_date",
        default=None,
        metavar="YYYY-MM-DD",
        help="End date (inclusive, default: yesterday)",
    )
    parser.add_argument(
        "--last",
        "-l",
        type=positive_int,
        default=None,
        metavar="N",
        help="Get highlights from the last N days (mutually exclusive with --from/--to)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show per-file details",
    )
