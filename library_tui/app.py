"""Main Textual application for library-tui."""

from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header

from library_tui.config import Config, get_config
from library_tui.data import load_library
from library_tui.logging_config import get_logger
from library_tui.progress import ProgressStore
from library_tui.state import FontSize, ReaderState, ResultKind, Screen
from library_tui.widgets import (
    BookSearchView,
    ChapterPicker,
    MainMenu,
    PsalmSearchView,
    PsalmView,
    ReaderView,
    ResultList,
    SearchSubmitted,
    StatusBar,
)

logger = get_logger(__name__)

# Which view is visible on which screen
VIEW_FOR_SCREEN = {
    Screen.MAIN_MENU: "#main-menu",
    Screen.BOOKS: "#books-view",
    Screen.BOOK_DETAIL: "#reader-view",
    Screen.PSALMS: "#psalms-view",
    Screen.PSALM_MODAL: "#psalm-view",
}


class LibraryApp(App):
    """Reader for a small library of books and psalms."""

    TITLE = "Библиотека"
    CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("escape", "back", "Back", show=False, priority=True),
        Binding("b", "open_section('books')", "Books", show=False),
        Binding("p", "open_section('psalms')", "Psalms", show=False),
        Binding("plus", "font_larger", "Larger text", show=False),
        Binding("minus", "font_smaller", "Smaller text", show=False),
        Binding("right_square_bracket", "next_chapter", "Next chapter", show=False),
        Binding("left_square_bracket", "prev_chapter", "Prev chapter", show=False),
        Binding("c", "chapter_picker", "Chapters", show=False),
    ]

    def __init__(self, config: Optional[Config] = None) -> None:
        super().__init__()

        self._config = config or get_config()

        library = load_library(self._config.data_path)
        progress = ProgressStore(self._config.progress_path)
        progress.load()

        self.state = ReaderState(
            library=library,
            progress=progress,
            font_size=FontSize.from_value(self._config.font_size),
        )
        self._in_picker_mode = False

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        yield MainMenu(id="main-menu")
        yield BookSearchView(id="books-view")
        yield ReaderView(id="reader-view")
        yield PsalmSearchView(id="psalms-view")
        yield PsalmView(id="psalm-view")
        yield StatusBar(id="status-bar")

    async def on_mount(self) -> None:
        """Initialize the app after mounting."""
        await self._show_screen()
        if not self.state.library.books and not self.state.library.psalms:
            self.query_one("#status-bar", StatusBar).show_message("Библиотека пуста")

    # ==================== Actions ====================

    async def action_back(self) -> None:
        """Close the chapter picker, or go back one screen (Esc)."""
        if self._in_picker_mode:
            self._close_picker()
            return

        previous = self.state.screen
        if previous is Screen.PSALM_MODAL:
            moved = self.state.close_psalm()
        else:
            moved = self.state.back()
        if not moved:
            return
        if self.state.screen is Screen.MAIN_MENU:
            await self._reset_search_view(previous)
        await self._show_screen()

    async def action_open_section(self, section: str) -> None:
        """Open books or psalms from the main menu."""
        target = Screen(section)
        if self.state.screen is not Screen.MAIN_MENU or not self.state.navigate(target):
            return
        await self._reset_search_view(target)
        await self._show_screen()

    def action_font_larger(self) -> None:
        """Increase the text size (stays at the largest level)."""
        if self.state.screen in (Screen.BOOK_DETAIL, Screen.PSALM_MODAL):
            self.state.increase_font_size()
            self._render_text()

    def action_font_smaller(self) -> None:
        """Decrease the text size (stays at the smallest level)."""
        if self.state.screen in (Screen.BOOK_DETAIL, Screen.PSALM_MODAL):
            self.state.decrease_font_size()
            self._render_text()

    def action_next_chapter(self) -> None:
        """Go to the next chapter (] key)."""
        if self.state.screen is Screen.BOOK_DETAIL and not self._in_picker_mode:
            if self.state.next_chapter():
                self._render_reader(scroll_home=True)
            else:
                self.query_one("#status-bar", StatusBar).show_message("Это последняя глава")

    def action_prev_chapter(self) -> None:
        """Go to the previous chapter ([ key)."""
        if self.state.screen is Screen.BOOK_DETAIL and not self._in_picker_mode:
            if self.state.prev_chapter():
                self._render_reader(scroll_home=True)
            else:
                self.query_one("#status-bar", StatusBar).show_message("Это первая глава")

    def action_chapter_picker(self) -> None:
        """Open the chapter picker (c key)."""
        book = self.state.current_book
        if self.state.screen is not Screen.BOOK_DETAIL or self._in_picker_mode or book is None:
            return
        self._in_picker_mode = True
        picker = ChapterPicker(book, self.state.selected_chapter_number, id="chapter-picker")
        self.mount(picker)

    # ==================== Event Handlers ====================

    async def on_main_menu_section_chosen(self, event: MainMenu.SectionChosen) -> None:
        """Handle a section chosen from the main menu."""
        await self.action_open_section(event.screen.value)

    async def on_search_submitted(self, event: SearchSubmitted) -> None:
        """Run a search and show its results."""
        if event.kind is ResultKind.BOOKS:
            results = self.state.run_book_search(event.query)
            view = self.query_one("#books-view", BookSearchView)
        elif event.kind is ResultKind.WORDS:
            results = self.state.run_word_search(event.query)
            view = self.query_one("#books-view", BookSearchView)
        else:
            results = self.state.run_psalm_search(event.query)
            view = self.query_one("#psalms-view", PsalmSearchView)

        await view.show_results(results, self.state.result_kind, self.state.results_message())
        if results:
            view.results_list.focus()
            self.query_one("#status-bar", StatusBar).show_message(f"Найдено: {len(view.results_list.entries)}")

    async def on_result_list_result_selected(self, event: ResultList.ResultSelected) -> None:
        """Open the selected book or psalm."""
        entry = event.entry
        if entry.kind is ResultKind.PSALMS:
            opened = self.state.select_psalm(entry.target_id)
        else:
            opened = self.state.select_book(entry.target_id)
        if opened:
            await self._show_screen()

    def on_chapter_picker_chapter_selected(self, event: ChapterPicker.ChapterSelected) -> None:
        """Handle chapter selection from picker."""
        self._close_picker()
        if self.state.select_chapter(event.chapter_number):
            self._render_reader(scroll_home=True)

    # ==================== Helper Methods ====================

    def _close_picker(self) -> None:
        """Close the chapter picker."""
        self._in_picker_mode = False
        for picker in self.query(ChapterPicker):
            picker.remove()
        self.query_one("#reader-view", ReaderView).focus_text()

    async def _reset_search_view(self, screen: Screen) -> None:
        """Clear the inputs and results of a search view."""
        if screen is Screen.BOOKS:
            await self.query_one("#books-view", BookSearchView).reset(self.state.results_message())
        elif screen is Screen.PSALMS:
            await self.query_one("#psalms-view", PsalmSearchView).reset(self.state.results_message())

    async def _show_screen(self) -> None:
        """Show the view of the current screen and focus it."""
        screen = self.state.screen
        logger.debug("Showing screen %s", screen.value)
        for view_screen, selector in VIEW_FOR_SCREEN.items():
            self.query_one(selector).display = view_screen is screen

        status = self.query_one("#status-bar", StatusBar)
        status.set_font_size(self.state.font_size)

        if screen is Screen.MAIN_MENU:
            status.set_screen(screen)
            self.query_one("#main-menu", MainMenu).focus_menu()
        elif screen in (Screen.BOOKS, Screen.PSALMS):
            status.set_screen(screen)
            view = self.query_one(VIEW_FOR_SCREEN[screen])
            if view.results_list.entries:
                view.results_list.focus()
            else:
                view.focus_input()
        elif screen is Screen.BOOK_DETAIL:
            self._render_reader(scroll_home=True)
            self.query_one("#reader-view", ReaderView).focus_text()
        elif screen is Screen.PSALM_MODAL:
            self._render_psalm()
            self.query_one("#psalm-view", PsalmView).focus_text()

    def _render_text(self) -> None:
        """Re-render whichever text view is open."""
        if self.state.screen is Screen.BOOK_DETAIL:
            self._render_reader()
        elif self.state.screen is Screen.PSALM_MODAL:
            self._render_psalm()

    def _render_reader(self, scroll_home: bool = False) -> None:
        """Render the current chapter."""
        book = self.state.current_book
        chapter = self.state.current_chapter
        reader = self.query_one("#reader-view", ReaderView)
        reader.update_content(book, chapter, self.state.font_size)
        if scroll_home:
            reader.scroll_to_top()

        status = self.query_one("#status-bar", StatusBar)
        location = f"{book.title} · Глава {chapter.number}" if book and chapter else ""
        status.set_screen(Screen.BOOK_DETAIL, location)
        status.set_font_size(self.state.font_size)

    def _render_psalm(self) -> None:
        """Render the selected psalm."""
        psalm = self.state.current_psalm
        self.query_one("#psalm-view", PsalmView).update_content(psalm, self.state.font_size)

        status = self.query_one("#status-bar", StatusBar)
        status.set_screen(Screen.PSALM_MODAL, f"Псалом {psalm.number}" if psalm else "")
        status.set_font_size(self.state.font_size)
