"""Tests for storing highlights with deduplication."""

from datetime import datetime

import pytest

from extract.models import BookData, BookHighlights, Highlight
from load.db.sqlite_adapter import SQLiteAdapter
from load.load_data import LoadStats, count_highlights, insert_highlight, load_books


@pytest.fixture
def adapter(tmp_path):
    adapter = SQLiteAdapter(tmp_path / "highlights.db")
    adapter.connect()
    adapter.create_schema()
    yield adapter
    adapter.close()


def make_highlight(text="A passage", page=10, **kwargs):
    return Highlight(text=text, datetime=datetime(2026, 1, 25, 10, 30, 0), page=page, **kwargs)


def make_entry(title, highlights, author="Author"):
    book = BookData(title=title, author=author, highlights=list(highlights))
    return BookHighlights(book=book, highlights=list(highlights), source_file=f"{title}.lua")


class TestInsertHighlight:
    """Tests for insert_highlight."""

    def test_inserts_new_highlight(self, adapter):
        assert insert_highlight(adapter, make_highlight(), "Book", "Author") is True
        assert count_highlights(adapter) == 1

    def test_duplicate_is_ignored(self, adapter):
        """Test the same title, page and text is stored once."""
        insert_highlight(adapter, make_highlight(), "Book", "Author")

        assert insert_highlight(adapter, make_highlight(), "Book", "Author") is False
        assert count_highlights(adapter) == 1

    def test_duplicate_ignores_other_fields(self, adapter):
        """Test chapter, note and time do not take part in deduplication."""
        insert_highlight(adapter, make_highlight(), "Book", "Author")
        changed = Highlight(
            text="A passage",
            datetime=datetime(2026, 1, 30, 8, 0, 0),
            page=10,
            chapter="Other",
            note="a note",
        )

        assert insert_highlight(adapter, changed, "Book", "Another Author") is False

    @pytest.mark.parametrize(
        "title, page, text",
        [("Book", 11, "A passage"), ("Other Book", 10, "A passage"), ("Book", 10, "Different")],
    )
    def test_any_key_difference_is_new(self, adapter, title, page, text):
        insert_highlight(adapter, make_highlight(), "Book", "Author")

        assert insert_highlight(adapter, make_highlight(text=text, page=page), title, "Author")
        assert count_highlights(adapter) == 2

    def test_stored_columns(self, adapter):
        """Test every field lands in its column with the datetime formatted."""
        highlight = make_highlight(chapter="Chapter 1", note="Remember this")
        insert_highlight(adapter, highlight, "Book", "Author")

        row = adapter.fetchone(
            "SELECT book_title, book_author, chapter, page, text, note, datetime, processed "
            "FROM highlights"
        )

        assert row == {
            "book_title": "Book",
            "book_author": "Author",
            "chapter": "Chapter 1",
            "page": 10,
            "text": "A passage",
            "note": "Remember this",
            "datetime": "2026-01-25 10:30:00",
            "processed": 0,
        }

    def test_missing_chapter_and_note_are_null(self, adapter):
        insert_highlight(adapter, make_highlight(), "Book", "Author")

        row = adapter.fetchone("SELECT chapter, note FROM highlights")

        assert row == {"chapter": None, "note": None}


class TestLoadBooks:
    """Tests for load_books."""

    def test_counts_inserted_and_ignored(self, adapter):
        entries = [
            make_entry("Book A", [make_highlight("one"), make_highlight("two", page=11)]),
            make_entry("Book B", [make_highlight("three")]),
        ]

        first = load_books(adapter, entries)
        second = load_books(adapter, entries)

        assert first == LoadStats(inserted=3, ignored=0)
        assert second == LoadStats(inserted=0, ignored=3)
        assert second.total == 3
        assert count_highlights(adapter) == 3

    def test_commits(self, adapter, tmp_path):
        """Test loaded rows are visible to a new connection."""
        load_books(adapter, [make_entry("Book A", [make_highlight()])])

        with SQLiteAdapter(tmp_path / "highlights.db") as other:
            assert count_highlights(other) == 1

    def test_only_stores_in_range_highlights(self, adapter):
        """Test the filtered list is stored, not every highlight of the book."""
        kept = make_highlight("kept")
        book = BookData(title="Book", highlights=[kept, make_highlight("out of range", page=2)])

        load_books(adapter, [BookHighlights(book=book, highlights=[kept], source_file="x")])

        rows = adapter.fetchall("SELECT text, book_author FROM highlights")
        assert rows == [{"text": "kept", "book_author": "Unknown"}]

    def test_empty_input(self, adapter):
        assert load_books(adapter, []) == LoadStats()
        assert count_highlights(adapter) == 0
