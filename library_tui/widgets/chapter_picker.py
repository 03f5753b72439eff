"""Chapter picker widget."""

from typing import List

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, ListItem, ListView, Static

from library_tui.data.types import Book, Chapter


class ChapterPicker(Widget):
    """Widget for choosing a chapter of the open book."""

    DEFAULT_CSS = """
    ChapterPicker {
        dock: right;
        width: 44;
        height: 100%;
        background: $surface;
        border: solid $primary;
        padding: 1;
    }

    ChapterPicker > .picker-title {
        height: 1;
        text-style: bold;
        color: $primary;
    }

    ChapterPicker > .picker-input {
        height: 3;
        margin-bottom: 1;
    }

    ChapterPicker > .picker-list {
        height: 1fr;
    }

    ChapterPicker > .picker-hint {
        height: 1;
        color: $text-muted;
    }
    """

    class ChapterSelected(Message):
        """Message sent when a chapter is selected."""

        def __init__(self, chapter_number: int) -> None:
            self.chapter_number = chapter_number
            super().__init__()

    def __init__(self, book: Book, current_chapter: int = 1, **kwargs) -> None:
        super().__init__(**kwargs)
        self._book = book
        self._current_chapter = current_chapter
        self._filtered: List[Chapter] = list(book.chapters)

    def compose(self) -> ComposeResult:
        yield Static(f"{self._book.title} - Глава", classes="picker-title")
        yield Input(
            placeholder=f"Номер главы ({len(self._book.chapters)})...",
            classes="picker-input",
            id="chapter-input",
        )
        yield ListView(classes="picker-list", id="chapter-list")
        yield Static("Enter=выбрать, Esc=отмена", classes="picker-hint")

    def on_mount(self) -> None:
        """Initialize the picker."""
        self._update_list()
        self.query_one("#chapter-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter chapters by number or title."""
        query = event.value.strip().lower()
        if not query:
            self._filtered = list(self._book.chapters)
        else:
            self._filtered = [
                ch for ch in self._book.chapters
                if query in str(ch.number) or query in ch.title.lower()
            ]
        self._update_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Select the typed chapter number, or the highlighted one."""
        event.stop()
        value = event.value.strip()
        if value.isdigit() and self._book.chapter(int(value)) is not None:
            self.post_message(self.ChapterSelected(int(value)))
            return
        self._select_current()

    def on_key(self, event) -> None:
        """Move through the list while typing."""
        key = event.key
        lst = self.query_one("#chapter-list", ListView)
        if key == "down":
            event.stop()
            if lst.index is not None and lst.index < len(self._filtered) - 1:
                lst.index += 1
        elif key == "up":
            event.stop()
            if lst.index is not None and lst.index > 0:
                lst.index -= 1

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle list item selection."""
        event.stop()
        self._select_current()

    def _update_list(self) -> None:
        """Update the chapter list display."""
        lst = self.query_one("#chapter-list", ListView)
        lst.clear()

        current_index = 0
        for i, chapter in enumerate(self._filtered):
            text = Text()
            if chapter.number == self._current_chapter:
                text.append("* ", style="bold green")
                current_index = i
            else:
                text.append("  ")
            text.append(f"{chapter.number:>3}  ", style="bold cyan")
            text.append(chapter.title)
            lst.append(ListItem(Static(text)))

        if self._filtered:
            lst.index = current_index

    def _select_current(self) -> None:
        """Select the highlighted chapter."""
        lst = self.query_one("#chapter-list", ListView)
        if lst.index is not None and lst.index < len(self._filtered):
            self.post_message(self.ChapterSelected(self._filtered[lst.index].number))
