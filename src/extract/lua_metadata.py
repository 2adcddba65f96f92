"""Parse KOReader `metadata.epub.lua` sidecar files into BookData.

KOReader stores per-book state as a Lua chunk returning one table literal:

    return {
        ["annotations"] = {
            [1] = {
                ["chapter"] = "Chapter 1",
                ["datetime"] = "2026-01-25 10:30:00",
                ["pageno"] = 42,
                ["text"] = "This is a highlighted text",
            },
        },
        ["doc_props"] = {
            ["title"] = "Test Book",
            ["authors"] = "Test Author",
        },
    }

The chunk is parsed with luaparser (never executed) and the syntax tree is
walked directly. Only `doc_props.title` is mandatory; every other missing or
mistyped field falls back to a default or drops the single annotation it
belongs to.
"""

from datetime import datetime

from luaparser import ast as lua_ast
from luaparser import astnodes

from common.constants import DATETIME_FORMAT, UNKNOWN_AUTHOR
from common.logger import get_logger

from .models import BookData, Highlight

logger = get_logger(__name__)

# Pages are stored in a 32-bit INTEGER column
_PAGE_MIN = -(2**31)
_PAGE_MAX = 2**31 - 1


class ParseError(Exception):
    """Base exception for metadata files that cannot be turned into a book."""

    pass


class InvalidLua(ParseError):
    """The file is not syntactically valid Lua."""

    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Failed to parse Lua: {details}")


class MissingTitle(ParseError):
    """The file parsed but doc_props carries no title."""

    def __init__(self, source_file: str):
        self.source_file = source_file
        super().__init__(f"Book has no title in doc_props: {source_file}")


def parse_metadata(content: str, source_file: str) -> BookData:
    """Parse the text of one metadata file.

    Args:
        content: Raw Lua source
        source_file: Label used in error messages (usually the file path)

    Returns:
        BookData with highlights in the order they appear in the file

    Raises:
        InvalidLua: If the text is not valid Lua
        MissingTitle: If doc_props.title is absent or empty
    """
    try:
        chunk = lua_ast.parse(content)
    except Exception as e:
        raise InvalidLua(f"{source_file}: {e}") from e

    title = None
    author = None
    highlights: list[Highlight] = []

    root = _returned_table(chunk)
    if root is not None:
        for key, value in _string_keyed_fields(root):
            if key == "doc_props" and isinstance(value, astnodes.Table):
                title, author = _extract_doc_props(value)
            elif key == "annotations" and isinstance(value, astnodes.Table):
                highlights = _extract_annotations(value, source_file)

    if not title:
        raise MissingTitle(source_file)

    return BookData(
        title=title,
        author=author if author is not None else UNKNOWN_AUTHOR,
        highlights=highlights,
    )


def _returned_table(chunk: astnodes.Chunk) -> astnodes.Table | None:
    """Table returned by the chunk's trailing return statement, if any."""
    statements = chunk.body.body if chunk.body is not None else []
    if not statements or not isinstance(statements[-1], astnodes.Return):
        return None

    values = statements[-1].values
    if not isinstance(values, list):
        values = [values] if values is not None else []

    if len(values) == 1 and isinstance(values[0], astnodes.Table):
        return values[0]
    return None


def _string_keyed_fields(table: astnodes.Table):
    """Yield (key, value) for fields written as ["key"] = value."""
    for table_field in table.fields:
        key = _string_value(table_field.key)
        if key is not None:
            yield key, table_field.value


def _string_value(node) -> str | None:
    if isinstance(node, astnodes.String):
        return node.s
    return None


def _int_value(node) -> int | None:
    if isinstance(node, astnodes.Number):
        # Fractional page numbers are not page numbers
        return node.n if isinstance(node.n, int) and not isinstance(node.n, bool) else None
    if isinstance(node, astnodes.UMinusOp):
        value = _int_value(node.operand)
        return -value if value is not None else None
    return None


def _page_value(node) -> int | None:
    value = _int_value(node)
    if value is None or not _PAGE_MIN <= value <= _PAGE_MAX:
        return None
    return value


def _parse_datetime(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.strptime(value, DATETIME_FORMAT)
    except ValueError:
        return None


def _extract_doc_props(table: astnodes.Table) -> tuple[str | None, str | None]:
    title = None
    author = None
    for key, value in _string_keyed_fields(table):
        if key == "title":
            title = _string_value(value)
        elif key == "authors":
            author = _string_value(value)
    return title, author


def _extract_annotations(table: astnodes.Table, source_file: str) -> list[Highlight]:
    highlights = []
    # Keys are positional indices ([1], [2], ...) and carry no meaning
    for table_field in table.fields:
        if not isinstance(table_field.value, astnodes.Table):
            continue
        highlight = _extract_single_annotation(table_field.value)
        if highlight is None:
            logger.debug(f"Skipping annotation without text or datetime in {source_file}")
            continue
        highlights.append(highlight)
    return highlights


def _extract_single_annotation(table: astnodes.Table) -> Highlight | None:
    chapter = None
    page = None
    text = None
    raw_datetime = None

    for key, value in _string_keyed_fields(table):
        if key == "chapter":
            chapter = _string_value(value)
        elif key == "pageno":
            page = _page_value(value)
        elif key == "text":
            text = _string_value(value)
        elif key == "datetime":
            raw_datetime = _string_value(value)

    when = _parse_datetime(raw_datetime)
    if not text or when is None:
        return None

    return Highlight(
        text=text,
        datetime=when,
        page=page if page is not None else 0,
        chapter=chapter,
    )
