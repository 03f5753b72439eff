"""Chapter reading view widget."""

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Static

from library_tui.data.types import Book, Chapter
from library_tui.state import FontSize


def format_body(content: str, font_size: FontSize) -> str:
    """Lay out text for a font size level.

    The extra large level leaves an empty line between lines of text.
    """
    if font_size is FontSize.EXTRA_LARGE:
        return "\n\n".join(content.splitlines())
    return content


class ReaderView(Vertical):
    """Widget that displays one chapter of a book."""

    DEFAULT_CSS = """
    ReaderView {
        width: 100%;
        height: 100%;
        background: $surface;
    }

    ReaderView > .reader-title {
        height: 1;
        padding: 0 2;
        margin-top: 1;
        text-style: bold;
        color: $primary;
    }

    ReaderView > .reader-chapter {
        height: 1;
        padding: 0 2;
        color: $text;
    }

    ReaderView > .reader-position {
        height: 1;
        padding: 0 2;
        color: $text-muted;
    }

    ReaderView > #reader-scroll {
        height: 1fr;
        margin-top: 1;
    }

    ReaderView #reader-text {
        width: 100%;
        padding: 0 2;
    }

    ReaderView.font-sm #reader-text {
        padding: 0 1;
        color: $text-muted;
    }

    ReaderView.font-lg #reader-text {
        padding: 1 4;
        text-style: bold;
    }

    ReaderView.font-xl #reader-text {
        padding: 1 8;
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", classes="reader-title", id="reader-title")
        yield Static("", classes="reader-chapter", id="reader-chapter")
        yield Static("", classes="reader-position", id="reader-position")
        with VerticalScroll(id="reader-scroll"):
            yield Static("", id="reader-text")

    def set_font_size(self, font_size: FontSize) -> None:
        """Apply a font size level."""
        for level in FontSize:
            self.remove_class(level.css_class)
        self.add_class(font_size.css_class)

    def update_content(
        self,
        book: Optional[Book],
        chapter: Optional[Chapter],
        font_size: FontSize,
    ) -> None:
        """Show a chapter. Renders nothing if either is missing."""
        self.set_font_size(font_size)
        title = self.query_one("#reader-title", Static)
        heading = self.query_one("#reader-chapter", Static)
        position = self.query_one("#reader-position", Static)
        body = self.query_one("#reader-text", Static)

        if book is None or chapter is None:
            for widget in (title, heading, position, body):
                widget.update("")
            return

        title.update(book.title)
        heading.update(chapter.title)

        numbers = book.chapter_numbers
        text = Text()
        text.append("Глава: ", style="dim")
        text.append(f"{chapter.number}", style="bold yellow")
        text.append(f" / {len(numbers)}", style="dim")
        if chapter.number != numbers[0]:
            text.append("   [ предыдущая", style="dim")
        if chapter.number != numbers[-1]:
            text.append("   ] следующая", style="dim")
        position.update(text)

        body.update(Text(format_body(chapter.content, font_size)))

    def scroll_to_top(self) -> None:
        self.query_one("#reader-scroll", VerticalScroll).scroll_home(animate=False)

    def focus_text(self) -> None:
        self.query_one("#reader-scroll", VerticalScroll).focus()
