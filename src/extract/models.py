"""Data models for extracted KOReader highlights."""

from dataclasses import dataclass, field
from datetime import date, datetime

from common.constants import UNKNOWN_AUTHOR


@dataclass
class Highlight:
    """A single highlight annotation from a book."""

    text: str
    datetime: datetime
    page: int = 0
    chapter: str | None = None
    note: str | None = None

    @property
    def date(self) -> date:
        """Calendar day the highlight was made on."""
        return self.datetime.date()


@dataclass
class BookData:
    """One parsed metadata file: the book and its highlights in file order."""

    title: str
    author: str = UNKNOWN_AUTHOR
    highlights: list[Highlight] = field(default_factory=list)


@dataclass
class BookHighlights:
    """A book paired with the highlights that fall inside the requested range."""

    book: BookData
    highlights: list[Highlight]
    source_file: str


@dataclass
class ExtractionSummary:
    """Counts describing one extraction run."""

    files_found: int = 0
    files_failed: int = 0
    books_with_highlights: int = 0
    highlights_in_range: int = 0
