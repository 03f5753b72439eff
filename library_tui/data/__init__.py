"""Data types, bundled texts and search."""

from library_tui.data.types import Book, Chapter, ChapterMatch, Library, Psalm, WordSearchResult
from library_tui.data.loader import load_books, load_library, load_psalms
from library_tui.data.search import (
    SNIPPET_RADIUS,
    make_snippet,
    search_books,
    search_psalms,
    search_words,
)

__all__ = [
    "Book",
    "Chapter",
    "ChapterMatch",
    "Library",
    "Psalm",
    "WordSearchResult",
    "load_books",
    "load_library",
    "load_psalms",
    "SNIPPET_RADIUS",
    "make_snippet",
    "search_books",
    "search_psalms",
    "search_words",
]
