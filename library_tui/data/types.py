"""Data types for library-tui."""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Chapter:
    """A single chapter of a book."""

    number: int
    title: str
    content: str

    @classmethod
    def from_dict(cls, data: dict) -> "Chapter":
        """Create from dictionary."""
        return cls(
            number=int(data["number"]),
            title=str(data.get("title", "")),
            content=str(data["content"]),
        )


@dataclass(frozen=True)
class Book:
    """A book with an ordered sequence of chapters."""

    id: str
    title: str
    chapters: Tuple[Chapter, ...] = ()

    @property
    def chapter_numbers(self) -> List[int]:
        """Return chapter numbers in reading order."""
        return [ch.number for ch in self.chapters]

    def chapter(self, number: int) -> Optional[Chapter]:
        """Return the chapter with the given number, if any."""
        for ch in self.chapters:
            if ch.number == number:
                return ch
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Book":
        """Create from dictionary.

        Raises ValueError when chapter numbers are not unique.
        """
        chapters = tuple(Chapter.from_dict(ch) for ch in data["chapters"])
        numbers = [ch.number for ch in chapters]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"duplicate chapter numbers in book {data.get('id')!r}")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            chapters=chapters,
        )


@dataclass(frozen=True)
class Psalm:
    """A short numbered text."""

    id: str
    number: int
    title: str
    content: str

    @property
    def heading(self) -> str:
        """Return formatted heading string."""
        return f"Псалом {self.number}: {self.title}"

    @classmethod
    def from_dict(cls, data: dict) -> "Psalm":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            number=int(data["number"]),
            title=str(data["title"]),
            content=str(data["content"]),
        )


@dataclass(frozen=True)
class Library:
    """All books and psalms available to the reader."""

    books: Tuple[Book, ...] = ()
    psalms: Tuple[Psalm, ...] = ()

    def find_book(self, book_id: Optional[str]) -> Optional[Book]:
        """Look up a book by id."""
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def find_psalm(self, psalm_id: Optional[str]) -> Optional[Psalm]:
        """Look up a psalm by id."""
        for psalm in self.psalms:
            if psalm.id == psalm_id:
                return psalm
        return None


@dataclass(frozen=True)
class ChapterMatch:
    """A chapter whose content matched a word search."""

    chapter_number: int
    chapter_title: str
    snippet: str
    match_start: int = 0
    match_end: int = 0

    @property
    def label(self) -> str:
        """Return formatted chapter label."""
        return f"Глава {self.chapter_number}: {self.chapter_title}"


@dataclass(frozen=True)
class WordSearchResult:
    """All matching chapters of one book."""

    book_id: str
    book_title: str
    matches: Tuple[ChapterMatch, ...] = ()
