"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from library_tui.state import FontSize, Screen

SCREEN_LABELS = {
    Screen.MAIN_MENU: "Главное меню",
    Screen.BOOKS: "Книги",
    Screen.BOOK_DETAIL: "Чтение",
    Screen.PSALMS: "Псалмы",
    Screen.PSALM_MODAL: "Псалом",
}

FONT_LABELS = {
    FontSize.SMALL: "A-",
    FontSize.BASE: "A",
    FontSize.LARGE: "A+",
    FontSize.EXTRA_LARGE: "A++",
}


class StatusBar(Static):
    """Status bar showing the current screen and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._screen = Screen.MAIN_MENU
        self._font_size = FontSize.BASE
        self._location = ""
        self._message: Optional[str] = None

    def set_screen(self, screen: Screen, location: str = "") -> None:
        """Set the current screen and an optional location string."""
        self._screen = screen
        self._location = location
        self._message = None
        self._update()

    def set_font_size(self, font_size: FontSize) -> None:
        self._font_size = font_size
        self._update()

    def show_message(self, message: str) -> None:
        """Show a temporary message."""
        self._message = message
        self._update()

    def _update(self) -> None:
        """Update the status bar display."""
        text = Text()
        text.append(SCREEN_LABELS[self._screen], style="bold")

        if self._location:
            text.append(" | ")
            text.append(self._location, style="cyan")

        if self._screen in (Screen.BOOK_DETAIL, Screen.PSALM_MODAL):
            text.append(" ")
            text.append(f"[{FONT_LABELS[self._font_size]}]", style="bold green")

        if self._message:
            text.append("  ")
            text.append(self._message, style="yellow")
        else:
            for i, (key, desc) in enumerate(self._get_hints()):
                text.append("  " if i == 0 else " ", style="dim")
                text.append(key, style="bold yellow")
                text.append(f" {desc}", style="dim")

        self.update(text)

    def _get_hints(self) -> list[tuple[str, str]]:
        """Get keybinding hints for the current screen."""
        if self._screen == Screen.MAIN_MENU:
            return [("b", "книги"), ("p", "псалмы"), ("q", "выход")]
        elif self._screen in (Screen.BOOKS, Screen.PSALMS):
            return [("Enter", "поиск/открыть"), ("Tab", "поле"), ("Esc", "меню")]
        elif self._screen == Screen.BOOK_DETAIL:
            return [("]/[", "глава"), ("c", "главы"), ("+/-", "размер"), ("Esc", "назад")]
        elif self._screen == Screen.PSALM_MODAL:
            return [("+/-", "размер"), ("Esc", "закрыть")]
        return []
