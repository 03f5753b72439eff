"""Main menu widget."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import ListItem, ListView, Static

from library_tui.state import Screen

MENU_ENTRIES = (
    (Screen.BOOKS, "Книги", "b"),
    (Screen.PSALMS, "Псалмы", "p"),
)


class MainMenu(Vertical):
    """Start screen with the two sections of the library."""

    DEFAULT_CSS = """
    MainMenu {
        width: 100%;
        height: 100%;
        align: center middle;
        background: $surface;
    }

    MainMenu > .menu-title {
        width: 40;
        height: 3;
        content-align: center middle;
        text-style: bold;
        color: $primary;
    }

    MainMenu > .menu-list {
        width: 40;
        height: 6;
        border: solid $primary;
    }

    MainMenu > .menu-hint {
        width: 40;
        height: 1;
        content-align: center middle;
        color: $text-muted;
    }
    """

    class SectionChosen(Message):
        """Message sent when a section of the library is chosen."""

        def __init__(self, screen: Screen) -> None:
            self.screen = screen
            super().__init__()

    def compose(self) -> ComposeResult:
        yield Static("Библиотека", classes="menu-title")
        items = []
        for _, label, key in MENU_ENTRIES:
            text = Text()
            text.append(f" {key} ", style="bold yellow")
            text.append(label)
            items.append(ListItem(Static(text)))
        yield ListView(*items, classes="menu-list", id="menu-list")
        yield Static("Enter=открыть, q=выход", classes="menu-hint")

    def focus_menu(self) -> None:
        """Focus the section list."""
        self.query_one("#menu-list", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle section selection."""
        event.stop()
        idx = event.list_view.index
        if idx is not None and idx < len(MENU_ENTRIES):
            self.post_message(self.SectionChosen(MENU_ENTRIES[idx][0]))
