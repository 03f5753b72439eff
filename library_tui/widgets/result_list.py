"""Search results list widget."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich.text import Text
from textual.message import Message
from textual.widgets import ListItem, ListView, Static

from library_tui.data.types import Book, ChapterMatch, Psalm, WordSearchResult
from library_tui.state import ResultKind, SearchResult


@dataclass(frozen=True)
class ResultEntry:
    """One selectable row of the list."""

    kind: ResultKind
    target_id: str
    chapter_number: Optional[int] = None


class ResultList(ListView):
    """List widget for book, word and psalm search results."""

    DEFAULT_CSS = """
    ResultList {
        width: 100%;
        height: auto;
        max-height: 100%;
        background: $surface;
    }

    ResultList > ListItem {
        padding: 0 1;
        height: auto;
    }

    ResultList > ListItem.--highlight {
        background: $accent;
    }
    """

    class ResultSelected(Message):
        """Message sent when a search result is selected."""

        def __init__(self, entry: ResultEntry) -> None:
            self.entry = entry
            super().__init__()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._entries: List[ResultEntry] = []

    @property
    def entries(self) -> List[ResultEntry]:
        return self._entries.copy()

    async def set_results(
        self,
        results: Sequence[SearchResult],
        kind: Optional[ResultKind],
    ) -> None:
        """Replace the displayed results.

        Args:
            results: Search results of a single kind
            kind: Which search produced them
        """
        self._entries = []
        items: List[ListItem] = []

        for result in results:
            if kind is ResultKind.BOOKS and isinstance(result, Book):
                self._entries.append(ResultEntry(kind, result.id))
                items.append(ListItem(Static(self._format_book(result))))
            elif kind is ResultKind.WORDS and isinstance(result, WordSearchResult):
                for match in result.matches:
                    self._entries.append(ResultEntry(kind, result.book_id, match.chapter_number))
                    items.append(ListItem(Static(self._format_match(result, match))))
            elif kind is ResultKind.PSALMS and isinstance(result, Psalm):
                self._entries.append(ResultEntry(kind, result.id))
                items.append(ListItem(Static(self._format_psalm(result))))

        await self.clear()
        if items:
            await self.extend(items)
            self.index = 0

    def get_selected_entry(self) -> Optional[ResultEntry]:
        """Get the currently highlighted entry."""
        if self.index is not None and 0 <= self.index < len(self._entries):
            return self._entries[self.index]
        return None

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Translate the list selection into a result selection."""
        event.stop()
        entry = self.get_selected_entry()
        if entry:
            self.post_message(self.ResultSelected(entry))

    def _format_book(self, book: Book) -> Text:
        text = Text()
        text.append(book.title, style="bold")
        text.append(f"  ({len(book.chapters)} гл.)", style="dim")
        return text

    def _format_psalm(self, psalm: Psalm) -> Text:
        text = Text()
        text.append(f"Псалом {psalm.number}: ", style="bold cyan")
        text.append(psalm.title, style="bold")
        return text

    def _format_match(self, result: WordSearchResult, match: ChapterMatch) -> Text:
        """Format a word match with the term highlighted in its snippet."""
        text = Text()
        text.append(result.book_title, style="bold")
        text.append(" · ", style="dim")
        text.append(match.label, style="cyan")
        text.append("\n")

        snippet = match.snippet.replace("\n", " ")
        if match.match_end > match.match_start:
            text.append(snippet[:match.match_start], style="italic")
            text.append(snippet[match.match_start:match.match_end], style="bold black on yellow")
            text.append(snippet[match.match_end:], style="italic")
        else:
            text.append(snippet, style="italic")
        return text
