"""Reader state: current screen, searches, selections and font size."""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Dict, FrozenSet, List, Optional, Union

from library_tui.data.search import search_books, search_psalms, search_words
from library_tui.data.types import Book, Chapter, Library, Psalm, WordSearchResult
from library_tui.logging_config import get_logger
from library_tui.progress import ProgressStore

logger = get_logger(__name__)


class Screen(Enum):
    """Screens of the reader."""

    MAIN_MENU = "main-menu"
    BOOKS = "books"
    BOOK_DETAIL = "book-detail"
    PSALMS = "psalms"
    PSALM_MODAL = "psalm-modal"


TRANSITIONS: Dict[Screen, FrozenSet[Screen]] = {
    Screen.MAIN_MENU: frozenset({Screen.BOOKS, Screen.PSALMS}),
    Screen.BOOKS: frozenset({Screen.BOOK_DETAIL, Screen.MAIN_MENU}),
    Screen.BOOK_DETAIL: frozenset({Screen.BOOKS}),
    Screen.PSALMS: frozenset({Screen.PSALM_MODAL, Screen.MAIN_MENU}),
    Screen.PSALM_MODAL: frozenset({Screen.PSALMS}),
}

BACK: Dict[Screen, Screen] = {
    Screen.BOOKS: Screen.MAIN_MENU,
    Screen.BOOK_DETAIL: Screen.BOOKS,
    Screen.PSALMS: Screen.MAIN_MENU,
    Screen.PSALM_MODAL: Screen.PSALMS,
}


@total_ordering
class FontSize(Enum):
    """Text size levels, smallest first."""

    SMALL = "sm"
    BASE = "base"
    LARGE = "lg"
    EXTRA_LARGE = "xl"

    @classmethod
    def from_value(cls, value: str) -> "FontSize":
        """Parse a config value, falling back to BASE."""
        try:
            return cls(value)
        except ValueError:
            return cls.BASE

    @property
    def index(self) -> int:
        return _FONT_ORDER.index(self)

    @property
    def css_class(self) -> str:
        return f"font-{self.value}"

    def larger(self) -> "FontSize":
        """Next size up, staying at EXTRA_LARGE."""
        return _FONT_ORDER[min(self.index + 1, len(_FONT_ORDER) - 1)]

    def smaller(self) -> "FontSize":
        """Next size down, staying at SMALL."""
        return _FONT_ORDER[max(self.index - 1, 0)]

    def __lt__(self, other: "FontSize") -> bool:
        if not isinstance(other, FontSize):
            return NotImplemented
        return self.index < other.index


_FONT_ORDER = list(FontSize)


class ResultKind(Enum):
    """Which search produced the current results."""

    BOOKS = "books"
    WORDS = "words"
    PSALMS = "psalms"


SearchResult = Union[Book, WordSearchResult, Psalm]

PROMPT_MESSAGE = "Введите запрос для поиска"
NOTHING_FOUND_MESSAGE = "Ничего не найдено"


@dataclass
class ReaderState:
    """All mutable state of the reader.

    Navigation only follows the edges in TRANSITIONS; invalid moves
    return False and leave the state untouched.
    """

    library: Library
    progress: ProgressStore
    screen: Screen = Screen.MAIN_MENU
    font_size: FontSize = FontSize.BASE
    # Searches
    book_query: str = ""
    word_query: str = ""
    psalm_query: str = ""
    results: List[SearchResult] = field(default_factory=list)
    result_kind: Optional[ResultKind] = None
    # Selection
    selected_book_id: Optional[str] = None
    selected_chapter_number: int = 1
    selected_psalm_id: Optional[str] = None

    # ==================== Navigation ====================

    def can_navigate(self, target: Screen) -> bool:
        return target in TRANSITIONS[self.screen]

    def navigate(self, target: Screen) -> bool:
        """Move to another screen if the transition is allowed."""
        if not self.can_navigate(target):
            logger.debug("Rejected transition %s -> %s", self.screen.value, target.value)
            return False
        logger.debug("Screen %s -> %s", self.screen.value, target.value)
        if self.screen in (Screen.MAIN_MENU, Screen.BOOKS, Screen.PSALMS) and target in (
            Screen.MAIN_MENU,
            Screen.BOOKS,
            Screen.PSALMS,
        ):
            self.clear_search()
        if self.screen is Screen.PSALM_MODAL:
            self.selected_psalm_id = None
        self.screen = target
        return True

    def back(self) -> bool:
        """Go back one level. Returns False on the main menu."""
        target = BACK.get(self.screen)
        if target is None:
            return False
        return self.navigate(target)

    # ==================== Searches ====================

    def clear_search(self) -> None:
        """Forget all search terms and results."""
        self.book_query = ""
        self.word_query = ""
        self.psalm_query = ""
        self.results = []
        self.result_kind = None

    def _set_results(self, kind: ResultKind, query: str, results: List[SearchResult]) -> None:
        if query.strip():
            self.results = results
            self.result_kind = kind
            logger.info("%s search %r: %d results", kind.value, query, len(results))
        else:
            self.results = []
            self.result_kind = None

    def run_book_search(self, query: str) -> List[SearchResult]:
        """Search book titles."""
        self.book_query = query
        self._set_results(ResultKind.BOOKS, query, list(search_books(self.library.books, query)))
        return self.results

    def run_word_search(self, query: str) -> List[SearchResult]:
        """Search chapter texts of all books."""
        self.word_query = query
        self._set_results(ResultKind.WORDS, query, list(search_words(self.library.books, query)))
        return self.results

    def run_psalm_search(self, query: str) -> List[SearchResult]:
        """Search psalms by title, number or text."""
        self.psalm_query = query
        self._set_results(ResultKind.PSALMS, query, list(search_psalms(self.library.psalms, query)))
        return self.results

    def results_message(self) -> Optional[str]:
        """Message to show instead of an empty result list."""
        if self.results:
            return None
        if self.screen in (Screen.PSALMS, Screen.PSALM_MODAL):
            has_query = bool(self.psalm_query.strip())
        else:
            has_query = bool(self.book_query.strip() or self.word_query.strip())
        return NOTHING_FOUND_MESSAGE if has_query else PROMPT_MESSAGE

    # ==================== Books ====================

    @property
    def current_book(self) -> Optional[Book]:
        return self.library.find_book(self.selected_book_id)

    @property
    def current_chapter(self) -> Optional[Chapter]:
        book = self.current_book
        if book is None:
            return None
        return book.chapter(self.selected_chapter_number)

    def select_book(self, book_id: str) -> bool:
        """Open a book at the remembered chapter, or chapter 1.

        Returns:
            True if the book exists and the reader was opened
        """
        book = self.library.find_book(book_id)
        if book is None or not self.can_navigate(Screen.BOOK_DETAIL):
            return False

        self.selected_book_id = book.id
        remembered = self.progress.get(book.id)
        if remembered is not None and book.chapter(remembered) is not None:
            self.selected_chapter_number = remembered
        else:
            self.selected_chapter_number = 1
        self.navigate(Screen.BOOK_DETAIL)
        return True

    def select_chapter(self, chapter_number: int) -> bool:
        """Switch chapter in the open book and remember it."""
        book = self.current_book
        if book is None or book.chapter(chapter_number) is None:
            return False
        self.selected_chapter_number = chapter_number
        self.progress.record(book.id, chapter_number)
        return True

    def _neighbour_chapter(self, step: int) -> Optional[int]:
        book = self.current_book
        if book is None:
            return None
        numbers = book.chapter_numbers
        try:
            idx = numbers.index(self.selected_chapter_number)
        except ValueError:
            return None
        target = idx + step
        if 0 <= target < len(numbers):
            return numbers[target]
        return None

    def next_chapter(self) -> bool:
        """Select the following chapter. Returns False at the last one."""
        number = self._neighbour_chapter(1)
        return number is not None and self.select_chapter(number)

    def prev_chapter(self) -> bool:
        """Select the preceding chapter. Returns False at the first one."""
        number = self._neighbour_chapter(-1)
        return number is not None and self.select_chapter(number)

    # ==================== Psalms ====================

    @property
    def current_psalm(self) -> Optional[Psalm]:
        return self.library.find_psalm(self.selected_psalm_id)

    def select_psalm(self, psalm_id: str) -> bool:
        """Open a psalm in the psalm view."""
        psalm = self.library.find_psalm(psalm_id)
        if psalm is None or not self.can_navigate(Screen.PSALM_MODAL):
            return False
        self.selected_psalm_id = psalm.id
        self.navigate(Screen.PSALM_MODAL)
        return True

    def close_psalm(self) -> bool:
        """Close the psalm view and return to the psalm list."""
        return self.navigate(Screen.PSALMS)

    # ==================== Font size ====================

    def increase_font_size(self) -> FontSize:
        self.font_size = self.font_size.larger()
        return self.font_size

    def decrease_font_size(self) -> FontSize:
        self.font_size = self.font_size.smaller()
        return self.font_size
