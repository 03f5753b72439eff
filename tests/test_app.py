"""Integration tests for the Textual app.

Use Textual's pilot API to drive the app with key presses.
"""

import json

import pytest
from textual.widgets import Input

from library_tui.app import LibraryApp
from library_tui.config import Config
from library_tui.state import FontSize, Screen
from library_tui.widgets import ChapterPicker, ReaderView, ResultList


@pytest.fixture
def app(tmp_path) -> LibraryApp:
    """App with bundled data and progress in a temporary directory."""
    config = Config(
        progress_file=str(tmp_path / "progress.json"),
        log_dir=str(tmp_path / "logs"),
    )
    return LibraryApp(config)


class TestLibraryApp:
    """Test navigation through the app."""

    @pytest.mark.asyncio
    async def test_starts_on_main_menu(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.state.screen is Screen.MAIN_MENU
            assert app.query_one("#main-menu").display is True
            assert app.query_one("#books-view").display is False

    @pytest.mark.asyncio
    async def test_open_books_and_back(self, app):
        async with app.run_test() as pilot:
            await pilot.press("b")
            await pilot.pause()
            assert app.state.screen is Screen.BOOKS
            assert app.query_one("#books-view").display is True

            await pilot.press("escape")
            await pilot.pause()
            assert app.state.screen is Screen.MAIN_MENU

    @pytest.mark.asyncio
    async def test_read_book_and_remember_chapter(self, app, tmp_path):
        async with app.run_test() as pilot:
            await pilot.press("b")
            await pilot.pause()
            app.query_one("#book-query", Input).value = "путь"
            app.query_one("#book-query", Input).focus()
            await pilot.press("enter")
            await pilot.pause()
            results = app.query_one("#book-results", ResultList)
            assert [e.target_id for e in results.entries] == ["book1"]

            results.focus()
            await pilot.press("enter")
            await pilot.pause()
            assert app.state.screen is Screen.BOOK_DETAIL
            assert app.state.selected_chapter_number == 1

            await pilot.press("right_square_bracket")
            await pilot.pause()
            assert app.state.selected_chapter_number == 2

            await pilot.press("plus")
            await pilot.pause()
            assert app.state.font_size is FontSize.LARGE
            assert app.query_one("#reader-view", ReaderView).has_class("font-lg")

            await pilot.press("escape")
            await pilot.pause()
            assert app.state.screen is Screen.BOOKS

        data = json.loads((tmp_path / "progress.json").read_text(encoding="utf-8"))
        assert data["readingProgress"]["book1"] == {"chapterNumber": 2}

    @pytest.mark.asyncio
    async def test_word_search_match_opens_book(self, app):
        async with app.run_test() as pilot:
            await pilot.press("b")
            await pilot.pause()
            word_input = app.query_one("#word-query", Input)
            word_input.value = "перевозчик"
            word_input.focus()
            await pilot.press("enter")
            await pilot.pause()

            results = app.query_one("#book-results", ResultList)
            assert [(e.target_id, e.chapter_number) for e in results.entries] == [("book1", 2)]

            results.focus()
            await pilot.press("enter")
            await pilot.pause()
            assert app.state.screen is Screen.BOOK_DETAIL
            assert app.state.selected_chapter_number == 1
            assert app.state.progress.get("book1") is None

    @pytest.mark.asyncio
    async def test_nothing_found_message(self, app):
        async with app.run_test() as pilot:
            await pilot.press("p")
            await pilot.pause()
            psalm_input = app.query_one("#psalm-query", Input)
            psalm_input.value = "несуществующее"
            await pilot.press("enter")
            await pilot.pause()
            assert app.state.results == []
            assert app.query_one("#psalm-results-message").display is True
            assert app.state.results_message() == "Ничего не найдено"

    @pytest.mark.asyncio
    async def test_psalm_view_closes_to_list(self, app):
        async with app.run_test() as pilot:
            await pilot.press("p")
            await pilot.pause()
            assert app.state.screen is Screen.PSALMS

            psalm_input = app.query_one("#psalm-query", Input)
            psalm_input.value = "5"
            await pilot.press("enter")
            await pilot.pause()
            results = app.query_one("#psalm-results", ResultList)
            assert [e.target_id for e in results.entries] == ["psalm5", "psalm5_duplicate"]

            results.focus()
            await pilot.press("down", "enter")
            await pilot.pause()
            assert app.state.screen is Screen.PSALM_MODAL
            assert app.state.selected_psalm_id == "psalm5_duplicate"
            assert app.query_one("#psalm-view").display is True

            await pilot.press("minus")
            await pilot.pause()
            assert app.state.font_size is FontSize.SMALL

            await pilot.press("escape")
            await pilot.pause()
            assert app.state.screen is Screen.PSALMS
            assert app.state.selected_psalm_id is None

    @pytest.mark.asyncio
    async def test_chapter_picker(self, app, tmp_path):
        async with app.run_test() as pilot:
            await pilot.press("b")
            await pilot.pause()
            app.query_one("#book-query", Input).value = "путь"
            await pilot.press("enter")
            await pilot.pause()
            app.query_one("#book-results", ResultList).focus()
            await pilot.press("enter")
            await pilot.pause()
            assert app.state.screen is Screen.BOOK_DETAIL

            await pilot.press("c")
            await pilot.pause()
            assert len(app.query(ChapterPicker)) == 1

            await pilot.press("escape")
            await pilot.pause()
            assert len(app.query(ChapterPicker)) == 0
            assert app.state.screen is Screen.BOOK_DETAIL

            await pilot.press("c")
            await pilot.pause()
            await pilot.press("3", "enter")
            await pilot.pause()
            assert app.state.selected_chapter_number == 3
            assert len(app.query(ChapterPicker)) == 0

        data = json.loads((tmp_path / "progress.json").read_text(encoding="utf-8"))
        assert data["readingProgress"]["book1"] == {"chapterNumber": 3}

    @pytest.mark.asyncio
    async def test_chapter_picker_ignores_unknown_number(self, app):
        async with app.run_test() as pilot:
            await pilot.press("b")
            await pilot.pause()
            app.query_one("#book-query", Input).value = "путь"
            await pilot.press("enter")
            await pilot.pause()
            app.query_one("#book-results", ResultList).focus()
            await pilot.press("enter")
            await pilot.pause()

            await pilot.press("c")
            await pilot.pause()
            await pilot.press("9", "enter")
            await pilot.pause()
            assert app.state.selected_chapter_number == 1
            assert len(app.query(ChapterPicker)) == 1
