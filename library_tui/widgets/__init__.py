"""Textual widgets for library-tui."""

from library_tui.widgets.main_menu import MainMenu
from library_tui.widgets.result_list import ResultEntry, ResultList
from library_tui.widgets.search_view import BookSearchView, PsalmSearchView, SearchSubmitted
from library_tui.widgets.reader_view import ReaderView
from library_tui.widgets.chapter_picker import ChapterPicker
from library_tui.widgets.psalm_view import PsalmView
from library_tui.widgets.status_bar import StatusBar

__all__ = [
    "MainMenu",
    "ResultEntry",
    "ResultList",
    "BookSearchView",
    "PsalmSearchView",
    "SearchSubmitted",
    "ReaderView",
    "ChapterPicker",
    "PsalmView",
    "StatusBar",
]
