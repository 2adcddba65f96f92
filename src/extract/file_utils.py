"""Utilities for locating and reading KOReader metadata files."""

from pathlib import Path

from common.constants import METADATA_FILENAME


def find_metadata_files(books_path: Path, filename: str = METADATA_FILENAME) -> list[Path]:
    """
    Recursively find KOReader metadata files under a directory.

    KOReader keeps one `<book>.sdr/metadata.epub.lua` next to each book, so
    the match is on the exact base name.

    Args:
        books_path: Root directory to search
        filename: Base name to match

    Returns:
        Sorted list of matching paths (empty if the directory does not exist)
    """
    if not books_path.is_dir():
        return []

    return sorted(path for path in books_path.rglob(filename) if path.is_file() and path.name == filename)


def read_metadata_file(path: Path) -> str:
    """
    Read a metadata file as text.

    Invalid UTF-8 sequences are replaced rather than failing the whole file;
    the Lua parser reports any real structural damage.

    Args:
        path: Metadata file path

    Returns:
        File contents
    """
    return path.read_text(encoding="utf-8", errors="replace")
