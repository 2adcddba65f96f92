"""Integration tests for extracting highlights from a books directory."""

import logging
from datetime import date

import pytest

from extract.date_range import DateRange
from extract.lua_metadata import InvalidLua
from extract.main import extract_book, extract_highlights
from extract.models import ExtractionSummary

WHOLE_WEEK = DateRange(date(2026, 1, 25), date(2026, 1, 31))


def test_extract_book(books_dir):
    """Test a single file is read and parsed."""
    book = extract_book(books_dir / "Test Book.sdr" / "metadata.epub.lua")

    assert book.title == "Test Book"
    assert len(book.highlights) == 2


def test_extract_book_propagates_parse_errors(books_dir):
    """Test extract_book leaves error handling to the caller."""
    with pytest.raises(InvalidLua):
        extract_book(books_dir / "Broken.sdr" / "metadata.epub.lua")


def test_extracts_valid_books_and_skips_broken(books_dir):
    """Test broken files do not stop the other books from being extracted."""
    results = extract_highlights(books_dir, WHOLE_WEEK)

    assert [r.book.title for r in results] == ["Test Book", "Other Book"]
    assert [len(r.highlights) for r in results] == [2, 1]
    assert results[1].highlights[0].page == 7


def test_summary_counts(books_dir):
    """Test the summary reflects the run."""
    summary = ExtractionSummary()

    extract_highlights(books_dir, WHOLE_WEEK, summary)

    assert summary.files_found == 4
    assert summary.files_failed == 2
    assert summary.books_with_highlights == 2
    assert summary.highlights_in_range == 3


def test_books_without_highlights_in_range_are_omitted(books_dir):
    """Test only books with in-range highlights are returned."""
    results = extract_highlights(books_dir, DateRange(date(2026, 1, 27), date(2026, 1, 27)))

    assert [r.book.title for r in results] == ["Other Book"]


def test_filtered_highlights_keep_full_book(books_dir):
    """Test the book keeps all its highlights while the entry holds the filtered ones."""
    results = extract_highlights(books_dir, DateRange(date(2026, 1, 25), date(2026, 1, 25)))

    assert len(results) == 1
    assert len(results[0].book.highlights) == 2
    assert [h.text for h in results[0].highlights] == ["This is a highlighted text"]
    assert results[0].source_file.endswith("metadata.epub.lua")


def test_parse_failures_are_logged(books_dir, caplog):
    """Test each skipped file is reported as a warning."""
    with caplog.at_level(logging.WARNING):
        extract_highlights(books_dir, WHOLE_WEEK)

    assert "Broken.sdr" in caplog.text
    assert "Failed to parse Lua" in caplog.text
    assert "Book has no title in doc_props" in caplog.text


def test_missing_books_directory(tmp_path, caplog):
    """Test a missing directory returns nothing and warns."""
    with caplog.at_level(logging.WARNING):
        results = extract_highlights(tmp_path / "missing", WHOLE_WEEK)

    assert results == []
    assert "Books directory not found" in caplog.text


def test_empty_books_directory(tmp_path, caplog):
    """Test a directory without metadata files returns nothing and warns."""
    with caplog.at_level(logging.WARNING):
        results = extract_highlights(tmp_path, WHOLE_WEEK)

    assert results == []
    assert "No metadata files found" in caplog.text
