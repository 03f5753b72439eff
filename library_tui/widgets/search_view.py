"""Book and psalm search views."""

from typing import Optional, Sequence

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Input, Static

from library_tui.state import ResultKind, SearchResult
from library_tui.widgets.result_list import ResultList


class SearchSubmitted(Message):
    """Message sent when a search input is submitted."""

    def __init__(self, kind: ResultKind, query: str) -> None:
        self.kind = kind
        self.query = query
        super().__init__()


class SearchPanel(Vertical):
    """Common layout: search inputs above a results pane."""

    DEFAULT_CSS = """
    SearchPanel {
        width: 100%;
        height: 100%;
        padding: 0 2;
        background: $surface;
    }

    SearchPanel .view-title {
        height: 1;
        margin-top: 1;
        text-style: bold;
        color: $primary;
    }

    SearchPanel .search-label {
        height: 1;
        margin-top: 1;
        color: $text;
    }

    SearchPanel .search-input {
        height: 3;
    }

    SearchPanel .results-header {
        height: 1;
        margin-top: 1;
        background: $primary-darken-1;
        color: $text;
        padding: 0 1;
        text-style: bold;
    }

    SearchPanel .results-message {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }

    SearchPanel .results-scroll {
        height: 1fr;
    }
    """

    # input id -> kind of search it runs
    INPUTS: dict = {}
    RESULTS_ID = ""
    MESSAGE_ID = ""

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Run the search belonging to the submitted input."""
        event.stop()
        kind = self.INPUTS.get(event.input.id or "")
        if kind is not None:
            self.post_message(SearchSubmitted(kind, event.value))

    async def show_results(
        self,
        results: Sequence[SearchResult],
        kind: Optional[ResultKind],
        message: Optional[str],
    ) -> None:
        """Render results, or the message when there are none."""
        notice = self.query_one(f"#{self.MESSAGE_ID}", Static)
        notice.update(message or "")
        notice.display = message is not None
        await self.results_list.set_results(results, kind)

    async def reset(self, message: Optional[str]) -> None:
        """Clear inputs and results."""
        for input_id in self.INPUTS:
            self.query_one(f"#{input_id}", Input).value = ""
        await self.show_results([], None, message)

    @property
    def results_list(self) -> ResultList:
        return self.query_one(f"#{self.RESULTS_ID}", ResultList)

    def focus_input(self) -> None:
        """Focus the first search input."""
        first = next(iter(self.INPUTS))
        self.query_one(f"#{first}", Input).focus()


class BookSearchView(SearchPanel):
    """Search books by title or by a word in their chapters."""

    INPUTS = {
        "book-query": ResultKind.BOOKS,
        "word-query": ResultKind.WORDS,
    }
    RESULTS_ID = "book-results"
    MESSAGE_ID = "book-results-message"

    def compose(self) -> ComposeResult:
        yield Static("Поиск книг", classes="view-title")
        yield Static("Поиск по книгам", classes="search-label")
        yield Input(placeholder="Введите название книги", classes="search-input", id="book-query")
        yield Static("Поиск по слову", classes="search-label")
        yield Input(placeholder="Введите слово для поиска", classes="search-input", id="word-query")
        yield Static("Результаты поиска", classes="results-header")
        yield Static("", classes="results-message", id=self.MESSAGE_ID)
        with VerticalScroll(classes="results-scroll"):
            yield ResultList(id=self.RESULTS_ID)


class PsalmSearchView(SearchPanel):
    """Search psalms by title, number or a line of text."""

    INPUTS = {
        "psalm-query": ResultKind.PSALMS,
    }
    RESULTS_ID = "psalm-results"
    MESSAGE_ID = "psalm-results-message"

    def compose(self) -> ComposeResult:
        yield Static("Поиск псалмов", classes="view-title")
        yield Static("Введите название, номер или строчку из псалма", classes="search-label")
        yield Input(placeholder="Введите запрос для поиска", classes="search-input", id="psalm-query")
        yield Static("Результаты поиска", classes="results-header")
        yield Static("", classes="results-message", id=self.MESSAGE_ID)
        with VerticalScroll(classes="results-scroll"):
            yield ResultList(id=self.RESULTS_ID)
