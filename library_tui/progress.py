"""Reading progress with JSON persistence."""

import json
from pathlib import Path
from typing import Dict, Optional

from library_tui.logging_config import get_logger

logger = get_logger(__name__)

STORAGE_KEY = "readingProgress"


class ProgressStore:
    """Remembers the last chapter read in each book.

    The whole mapping is written to disk on every change, stored as
    ``{"readingProgress": {book_id: {"chapterNumber": n}}}``.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._progress: Dict[str, int] = {}

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Load progress from disk. Anything unreadable counts as empty."""
        self._progress = {}
        if not self._path.exists():
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
            entries = data.get(STORAGE_KEY, {})
            for book_id, entry in entries.items():
                if not isinstance(entry, dict):
                    continue
                chapter = entry.get("chapterNumber")
                if isinstance(chapter, int) and not isinstance(chapter, bool):
                    self._progress[str(book_id)] = chapter
        except (ValueError, OSError, AttributeError) as e:
            logger.warning("Ignoring unreadable progress file %s: %s", self._path, e)
            self._progress = {}
        logger.debug("Loaded progress for %d books", len(self._progress))

    def save(self) -> None:
        """Save progress to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump({STORAGE_KEY: self.to_dict()}, f, ensure_ascii=False, indent=2)

    def get(self, book_id: str) -> Optional[int]:
        """Get the last chapter read in a book."""
        return self._progress.get(book_id)

    def record(self, book_id: str, chapter_number: int) -> None:
        """Remember a chapter selection and persist."""
        self._progress[book_id] = chapter_number
        logger.debug("Progress: %s -> chapter %d", book_id, chapter_number)
        try:
            self.save()
        except OSError as e:
            logger.error("Could not save progress to %s: %s", self._path, e)

    def to_dict(self) -> Dict[str, dict]:
        """Serialize to dictionary."""
        return {
            book_id: {"chapterNumber": chapter}
            for book_id, chapter in self._progress.items()
        }

    def __len__(self) -> int:
        return len(self._progress)
