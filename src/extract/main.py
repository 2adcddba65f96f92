"""
Collect highlights from every KOReader metadata file under a books directory.

Files are parsed independently: a broken or untitled metadata file is logged
and skipped so the rest of the library is still extracted.
"""

from pathlib import Path

from common.logger import get_logger

from .date_range import DateRange
from .file_utils import find_metadata_files, read_metadata_file
from .filters import filter_by_date
from .lua_metadata import ParseError, parse_metadata
from .models import BookData, BookHighlights, ExtractionSummary

logger = get_logger(__name__)


def extract_book(path: Path) -> BookData:
    """
    Read and parse one metadata file.

    Args:
        path: Path to a metadata.epub.lua file

    Returns:
        Parsed book with all of its highlights

    Raises:
        ParseError: If the file is not valid Lua or has no title
    """
    return parse_metadata(read_metadata_file(path), str(path))


def extract_highlights(
    books_path: Path,
    date_range: DateRange,
    summary: ExtractionSummary | None = None,
) -> list[BookHighlights]:
    """
    Extract highlights inside a date range from all books under a directory.

    Args:
        books_path: Directory containing books and their .sdr folders
        date_range: Inclusive range of days to keep
        summary: Optional summary to fill with run counts

    Returns:
        One entry per book that has at least one highlight in range,
        in metadata file path order
    """
    if summary is None:
        summary = ExtractionSummary()

    if not books_path.is_dir():
        logger.warning(f"Books directory not found: {books_path}")
        return []

    metadata_files = find_metadata_files(books_path)
    summary.files_found = len(metadata_files)

    if not metadata_files:
        logger.warning(f"No metadata files found in {books_path}")
        return []

    logger.info(f"Found [bold]{len(metadata_files)}[/bold] metadata file(s)")

    results = []
    for path in metadata_files:
        try:
            book = extract_book(path)
        except ParseError as e:
            summary.files_failed += 1
            logger.warning(f"[yellow]⚠[/yellow] Skipping {path}: {e}")
            continue
        except OSError as e:
            summary.files_failed += 1
            logger.warning(f"[yellow]⚠[/yellow] Could not read {path}: {e}")
            continue

        in_range = filter_by_date(book.highlights, date_range)
        logger.debug(
            f'"{book.title}": {len(in_range)}/{len(book.highlights)} highlight(s) in range'
        )

        if in_range:
            results.append(BookHighlights(book=book, highlights=in_range, source_file=str(path)))
            summary.books_with_highlights += 1
            summary.highlights_in_range += len(in_range)

    return results
