"""Load books and psalms from JSON documents."""

import json
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

from library_tui.data.types import Book, Library, Psalm
from library_tui.logging_config import get_logger

logger = get_logger(__name__)

BUNDLED_DATA_DIR = Path(__file__).parent

T = TypeVar("T")


def _load_records(directory: Path, factory: Callable[[dict], T]) -> List[T]:
    """Read every *.json file in directory, in filename order.

    Unreadable or malformed files are skipped.
    """
    if not directory.is_dir():
        logger.info("No data directory at %s", directory)
        return []

    records: List[T] = []
    for path in sorted(directory.glob("*.json")):
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            records.append(factory(data))
        except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping %s: %s", path.name, e)
    return records


def load_books(directory: Path) -> List[Book]:
    """Load all books from a directory of JSON files."""
    return _load_records(directory, Book.from_dict)


def load_psalms(directory: Path) -> List[Psalm]:
    """Load all psalms from a directory of JSON files."""
    return _load_records(directory, Psalm.from_dict)


def load_library(data_dir: Optional[Path] = None) -> Library:
    """Load the library.

    Args:
        data_dir: Directory with books/ and psalms/ subdirectories.
            Defaults to the data bundled with the package.

    Returns:
        Library with whatever could be loaded
    """
    root = data_dir or BUNDLED_DATA_DIR
    books = load_books(root / "books")
    psalms = load_psalms(root / "psalms")
    logger.info("Loaded %d books and %d psalms from %s", len(books), len(psalms), root)
    return Library(books=tuple(books), psalms=tuple(psalms))
