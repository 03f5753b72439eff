"""Psalm reading view widget."""

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Static

from library_tui.data.types import Psalm
from library_tui.state import FontSize
from library_tui.widgets.reader_view import format_body


class PsalmView(Vertical):
    """Framed view of a single psalm, closed with Esc."""

    DEFAULT_CSS = """
    PsalmView {
        width: 100%;
        height: 100%;
        align: center middle;
        background: $background;
    }

    PsalmView > #psalm-box {
        width: 80;
        max-width: 100%;
        height: auto;
        max-height: 90%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    PsalmView #psalm-heading {
        height: auto;
        text-style: bold;
        color: $primary;
    }

    PsalmView #psalm-hint {
        height: 1;
        color: $text-muted;
        margin-bottom: 1;
    }

    PsalmView #psalm-scroll {
        height: auto;
        max-height: 30;
    }

    PsalmView.font-sm #psalm-text {
        color: $text-muted;
    }

    PsalmView.font-lg #psalm-text {
        padding: 0 2;
        text-style: bold;
    }

    PsalmView.font-xl #psalm-text {
        padding: 0 4;
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="psalm-box"):
            yield Static("", id="psalm-heading")
            yield Static("", id="psalm-hint")
            with VerticalScroll(id="psalm-scroll"):
                yield Static("", id="psalm-text")

    def update_content(self, psalm: Optional[Psalm], font_size: FontSize) -> None:
        """Show a psalm. Renders nothing if it is missing."""
        for level in FontSize:
            self.remove_class(level.css_class)
        self.add_class(font_size.css_class)

        heading = self.query_one("#psalm-heading", Static)
        hint = self.query_one("#psalm-hint", Static)
        body = self.query_one("#psalm-text", Static)

        if psalm is None:
            for widget in (heading, hint, body):
                widget.update("")
            return

        heading.update(psalm.heading)
        hint_text = Text()
        for key, desc in (("Esc", "закрыть"), ("+/-", "размер текста")):
            hint_text.append(key, style="bold yellow")
            hint_text.append(f" {desc}  ", style="dim")
        hint.update(hint_text)
        body.update(Text(format_body(psalm.content, font_size)))

    def focus_text(self) -> None:
        self.query_one("#psalm-scroll", VerticalScroll).focus()
