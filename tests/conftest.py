"""Shared fixtures: KOReader metadata samples and a fake books directory."""

from pathlib import Path

import pytest

SAMPLE_LUA = """\
-- we can read Lua syntax here!
return {
    ["annotations"] = {
        [1] = {
            ["chapter"] = "Chapter 1",
            ["datetime"] = "2026-01-25 10:30:00",
            ["pageno"] = 42,
            ["text"] = "This is a highlighted text",
        },
        [2] = {
            ["chapter"] = "Chapter 2",
            ["datetime"] = "2026-01-26 14:00:00",
            ["pageno"] = 100,
            ["text"] = "Another highlight",
        },
    },
    ["doc_props"] = {
        ["title"] = "Test Book",
        ["authors"] = "Test Author",
    },
}
"""

LUA_WITHOUT_TITLE = """
return {
    ["doc_props"] = {
        ["authors"] = "Some Author",
    },
}
"""

LUA_INVALID = """
return { this is not valid lua [[[
"""


def _book(title: str, date_str: str, text: str, page: int = 1) -> str:
    return f"""
return {{
    ["annotations"] = {{
        [1] = {{
            ["datetime"] = "{date_str}",
            ["pageno"] = {page},
            ["text"] = "{text}",
        }},
    }},
    ["doc_props"] = {{
        ["title"] = "{title}",
    }},
}}
"""


@pytest.fixture
def sample_lua() -> str:
    return SAMPLE_LUA


@pytest.fixture
def lua_without_title() -> str:
    return LUA_WITHOUT_TITLE


@pytest.fixture
def lua_invalid() -> str:
    return LUA_INVALID


@pytest.fixture
def books_dir(tmp_path) -> Path:
    """A books directory laid out the way KOReader writes it.

    Contains two valid books, one broken file, one untitled file and a
    metadata file for a non-epub document that must not be picked up.
    """
    root = tmp_path / "books"

    files = {
        "Test Book.sdr/metadata.epub.lua": SAMPLE_LUA,
        "nested/Other Book.sdr/metadata.epub.lua": _book(
            "Other Book", "2026-01-27 09:15:00", "A line from another book", page=7
        ),
        "Broken.sdr/metadata.epub.lua": LUA_INVALID,
        "Untitled.sdr/metadata.epub.lua": LUA_WITHOUT_TITLE,
        "Paper.sdr/metadata.pdf.lua": _book("Paper", "2026-01-25 08:00:00", "From a PDF"),
    }
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    return root
