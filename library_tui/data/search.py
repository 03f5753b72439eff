"""Substring search over books and psalms.

All searches are case-insensitive containment checks. An empty or
whitespace-only query yields no results.
"""

from typing import List, Sequence, Tuple

from library_tui.data.types import Book, ChapterMatch, Psalm, WordSearchResult

# Characters shown on each side of the first match
SNIPPET_RADIUS = 30


def _normalize(query: str) -> str:
    return query.strip()


def search_books(books: Sequence[Book], query: str) -> List[Book]:
    """Find books whose title contains the query.

    Args:
        books: Books to search
        query: Search term

    Returns:
        Matching books in library order
    """
    term = _normalize(query).lower()
    if not term:
        return []
    return [book for book in books if term in book.title.lower()]


def make_snippet(text: str, term: str, radius: int = SNIPPET_RADIUS) -> Tuple[str, int, int]:
    """Cut a snippet around the first occurrence of term.

    Args:
        text: Full chapter text
        term: Search term
        radius: Characters to keep on each side of the match

    Returns:
        Tuple of (snippet, match_start, match_end) with offsets relative
        to the snippet. If the term is not present the whole text is
        returned with empty match offsets.
    """
    index = text.lower().find(term.lower())
    if index == -1:
        return text, 0, 0

    start = max(0, index - radius)
    end = min(len(text), index + len(term) + radius)
    return text[start:end], index - start, index - start + len(term)


def search_words(books: Sequence[Book], query: str) -> List[WordSearchResult]:
    """Find chapters whose content contains the query.

    Args:
        books: Books to search
        query: Search term

    Returns:
        One result per book with at least one matching chapter
    """
    term = _normalize(query)
    if not term:
        return []

    needle = term.lower()
    results: List[WordSearchResult] = []

    for book in books:
        matches = []
        for chapter in book.chapters:
            if needle not in chapter.content.lower():
                continue
            snippet, match_start, match_end = make_snippet(chapter.content, term)
            matches.append(ChapterMatch(
                chapter_number=chapter.number,
                chapter_title=chapter.title,
                snippet=snippet,
                match_start=match_start,
                match_end=match_end,
            ))
        if matches:
            results.append(WordSearchResult(
                book_id=book.id,
                book_title=book.title,
                matches=tuple(matches),
            ))

    return results


def search_psalms(psalms: Sequence[Psalm], query: str) -> List[Psalm]:
    """Find psalms by title, number or a line of their text.

    Args:
        psalms: Psalms to search
        query: Search term

    Returns:
        Matching psalms in library order
    """
    term = _normalize(query)
    if not term:
        return []

    needle = term.lower()
    return [
        p for p in psalms
        if needle in p.title.lower()
        or term in str(p.number)
        or needle in p.content.lower()
    ]
