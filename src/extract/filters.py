"""Date filtering for extracted highlights."""

from collections.abc import Iterable

from .date_range import DateRange
from .models import Highlight


def filter_by_date(highlights: Iterable[Highlight], date_range: DateRange) -> list[Highlight]:
    """Keep highlights made on a day inside the range (both ends inclusive).

    Time of day is ignored and the original order is preserved.
    """
    return [h for h in highlights if h.date in date_range]
