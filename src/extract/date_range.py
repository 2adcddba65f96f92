"""Resolve the user's date options into a concrete inclusive date range.

Four inputs take part: an explicit start, an explicit end, "last N days", and
today's date. They are interpreted in a fixed order so that conflicting
options always fail instead of one silently winning:

1. --from/--to together with --last is an error.
2. --last N covers [today - N days, yesterday].
3. --to without --from is an error.
4. --from alone runs until yesterday.
5. No options covers the current week (from Sunday) up to yesterday.

Today is always excluded because its highlights are usually still coming in.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from common.constants import DATE_FORMAT

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# date.weekday() numbering
_SUNDAY = 6


class ConfigError(Exception):
    """Base exception for invalid date options."""

    pass


class InvalidDateFormat(ConfigError):
    """A date option is not a YYYY-MM-DD calendar date."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date format: '{value}'. Expected YYYY-MM-DD")


class InvalidDateRange(ConfigError):
    """The start of the range falls after its end."""

    def __init__(self):
        super().__init__("Invalid date range: --from must be before or equal to --to")


class MutuallyExclusiveFlags(ConfigError):
    """An explicit range was combined with --last."""

    def __init__(self):
        super().__init__("Use --from/--to OR --last, not both")


class MissingFromDate(ConfigError):
    """An end date was given without a start date."""

    def __init__(self):
        super().__init__("Use --from together with --to")


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    from_date: date
    to_date: date

    def __post_init__(self):
        if self.from_date > self.to_date:
            raise InvalidDateRange()

    def __contains__(self, day: date) -> bool:
        return self.from_date <= day <= self.to_date

    def __str__(self) -> str:
        return f"{self.from_date.isoformat()} → {self.to_date.isoformat()}"


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string.

    Args:
        value: Date string as typed by the user

    Returns:
        Parsed date

    Raises:
        InvalidDateFormat: If the string is not zero-padded YYYY-MM-DD or
            does not name a real calendar day
    """
    if not _DATE_PATTERN.match(value):
        raise InvalidDateFormat(value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormat(value) from e


def _as_date(value: str | date) -> date:
    if isinstance(value, date):
        return value
    return parse_date(value)


def compute_week_range(today: date) -> DateRange:
    """Range from the last Sunday up to yesterday.

    A run on Sunday covers the whole previous week rather than an empty range.
    """
    days_since_sunday = (today.weekday() - _SUNDAY) % 7 or 7
    return DateRange(today - timedelta(days=days_since_sunday), today - timedelta(days=1))


def compute_last_n_days(today: date, days: int) -> DateRange:
    """Range covering the `days` days before today."""
    if days < 1:
        raise InvalidDateRange()
    try:
        start = today - timedelta(days=days)
    except OverflowError as e:
        # Reaches back before date.min
        raise InvalidDateRange() from e
    return DateRange(start, today - timedelta(days=1))


def resolve_date_range(
    from_date: str | date | None,
    to_date: str | date | None,
    last_n_days: int | None,
    today: date,
) -> DateRange:
    """Turn the date options into an inclusive DateRange.

    Date strings are parsed only once the rule that consumes them is reached,
    so option conflicts are reported before formatting problems.

    Args:
        from_date: Explicit start (date or YYYY-MM-DD string)
        to_date: Explicit end (date or YYYY-MM-DD string)
        last_n_days: Number of days before today to cover
        today: Date of the run

    Returns:
        Resolved date range

    Raises:
        MutuallyExclusiveFlags: If an explicit date is combined with last_n_days
        MissingFromDate: If to_date is given without from_date
        InvalidDateFormat: If a date string cannot be parsed
        InvalidDateRange: If the start falls after the end
    """
    has_explicit_range = from_date is not None or to_date is not None

    if has_explicit_range and last_n_days is not None:
        raise MutuallyExclusiveFlags()

    if last_n_days is not None:
        return compute_last_n_days(today, last_n_days)

    if to_date is not None and from_date is None:
        raise MissingFromDate()

    if from_date is not None:
        start = _as_date(from_date)
        end = _as_date(to_date) if to_date is not None else today - timedelta(days=1)
        return DateRange(start, end)

    return compute_week_range(today)
