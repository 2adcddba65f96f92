"""Load extracted highlights into the database.

Highlights are deduplicated by (book_title, page, text): inserting one that
is already stored is a no-op and is counted as ignored.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from common.constants import DATETIME_FORMAT
from common.logger import get_logger
from extract.models import BookHighlights, Highlight

from .db import DatabaseAdapter

logger = get_logger(__name__)

INSERT_HIGHLIGHT_SQL = """
    INSERT INTO highlights
        (book_title, book_author, chapter, page, text, note, datetime)
    VALUES (?, ?, ?, ?, ?, ?, ?)
    ON CONFLICT (book_title, page, text) DO NOTHING
"""


@dataclass
class LoadStats:
    """Outcome of loading a batch of highlights."""

    inserted: int = 0
    ignored: int = 0

    @property
    def total(self) -> int:
        return self.inserted + self.ignored


def insert_highlight(
    adapter: DatabaseAdapter,
    highlight: Highlight,
    book_title: str,
    book_author: str,
) -> bool:
    """Insert one highlight unless it is already stored.

    Args:
        adapter: Connected database adapter
        highlight: Highlight to store
        book_title: Title of the book it belongs to
        book_author: Author of the book

    Returns:
        True if a new row was inserted, False if it was a duplicate
    """
    cursor = adapter.execute(
        INSERT_HIGHLIGHT_SQL,
        (
            book_title,
            book_author,
            highlight.chapter,
            highlight.page,
            highlight.text,
            highlight.note,
            highlight.datetime.strftime(DATETIME_FORMAT),
        ),
    )
    return cursor.rowcount > 0


def load_books(adapter: DatabaseAdapter, books: Iterable[BookHighlights]) -> LoadStats:
    """Store the highlights of every book and commit.

    Args:
        adapter: Connected database adapter with the schema created
        books: Books with their in-range highlights

    Returns:
        Counts of inserted and ignored highlights
    """
    stats = LoadStats()

    for entry in books:
        book_stats = LoadStats()
        for highlight in entry.highlights:
            if insert_highlight(adapter, highlight, entry.book.title, entry.book.author):
                book_stats.inserted += 1
            else:
                book_stats.ignored += 1

        logger.debug(
            f'"{entry.book.title}": {book_stats.inserted} new, {book_stats.ignored} duplicate(s)'
        )
        stats.inserted += book_stats.inserted
        stats.ignored += book_stats.ignored

    adapter.commit()
    return stats


def count_highlights(adapter: DatabaseAdapter) -> int:
    """Total number of stored highlights."""
    return adapter.fetchscalar("SELECT COUNT(*) AS total FROM highlights") or 0
