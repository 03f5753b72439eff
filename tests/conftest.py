"""Shared fixtures."""

import pytest

from library_tui.data.loader import load_library
from library_tui.data.types import Book, Chapter, Library, Psalm
from library_tui.progress import ProgressStore
from library_tui.state import ReaderState


@pytest.fixture
def bundled_library() -> Library:
    """The library shipped with the package."""
    return load_library()


@pytest.fixture
def library() -> Library:
    """A small hand-made library."""
    return Library(
        books=(
            Book("garden", "The Garden Book", (
                Chapter(1, "Seeds", "Plant the seeds in spring when the soil is warm."),
                Chapter(2, "Water", "Water the young plants every morning."),
                Chapter(3, "Harvest", "In autumn the garden gives its harvest of apples."),
            )),
            Book("sea", "Songs of the Sea", (
                Chapter(1, "Waves", "The waves roll in under a grey morning sky."),
            )),
        ),
        psalms=(
            Psalm("p1", 1, "Blessed is the man", "He is like a tree planted by streams of water."),
            Psalm("p12", 12, "Help, Lord", "The words of the Lord are pure words."),
            Psalm("p23", 23, "The Lord is my shepherd", "He leads me beside still waters."),
        ),
    )


@pytest.fixture
def progress(tmp_path) -> ProgressStore:
    store = ProgressStore(tmp_path / "progress.json")
    store.load()
    return store


@pytest.fixture
def state(library, progress) -> ReaderState:
    return ReaderState(library=library, progress=progress)
