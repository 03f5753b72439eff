"""Tests for loading bundled and custom data."""

import json

import pytest

from library_tui.data.loader import load_books, load_library, load_psalms
from library_tui.data.types import Book, Psalm


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


class TestBundledData:
    """Test the data shipped with the package."""

    def test_books(self, bundled_library):
        assert [b.id for b in bundled_library.books] == ["book1", "book2"]
        book = bundled_library.find_book("book1")
        assert book.title == "Путь паломника"
        assert book.chapter_numbers == [1, 2, 3]

    def test_psalms(self, bundled_library):
        assert [p.id for p in bundled_library.psalms] == [
            "psalm1", "psalm2", "psalm3", "psalm4", "psalm5", "psalm5_duplicate",
        ]
        assert [p.number for p in bundled_library.psalms] == [1, 2, 3, 4, 5, 5]

    def test_find_missing(self, bundled_library):
        assert bundled_library.find_book("nope") is None
        assert bundled_library.find_psalm(None) is None


class TestCustomData:
    """Test loading from a data directory."""

    def test_load_library_from_dir(self, tmp_path):
        _write(tmp_path / "books" / "a.json", {
            "id": 7,
            "title": "Seven",
            "chapters": [{"number": 1, "title": "One", "content": "text"}],
        })
        _write(tmp_path / "psalms" / "p.json", {
            "id": "x", "number": "9", "title": "Nine", "content": "nine",
        })
        library = load_library(tmp_path)
        assert library.books[0].id == "7"
        assert library.psalms[0].number == 9

    def test_missing_dirs_are_empty(self, tmp_path):
        library = load_library(tmp_path)
        assert library.books == ()
        assert library.psalms == ()

    def test_files_in_name_order(self, tmp_path):
        for name in ["b", "c", "a"]:
            _write(tmp_path / f"{name}.json", {
                "id": name, "number": 1, "title": name, "content": "",
            })
        assert [p.id for p in load_psalms(tmp_path)] == ["a", "b", "c"]

    @pytest.mark.parametrize("content", [
        "{broken",
        json.dumps({"title": "no id", "chapters": []}),
        json.dumps({"id": "dup", "title": "Dup", "chapters": [
            {"number": 1, "title": "A", "content": "a"},
            {"number": 1, "title": "B", "content": "b"},
        ]}),
        json.dumps({"id": "bad", "title": "Bad", "chapters": [
            {"number": "one", "title": "A", "content": "a"},
        ]}),
        json.dumps(["not", "a", "book"]),
    ])
    def test_malformed_files_skipped(self, tmp_path, content):
        """Bad files are skipped, good ones still load."""
        (tmp_path / "bad.json").write_text(content, encoding="utf-8")
        _write(tmp_path / "good.json", {"id": "g", "title": "Good", "chapters": []})
        assert [b.id for b in load_books(tmp_path)] == ["g"]


class TestTypes:
    """Test data type helpers."""

    def test_book_frozen(self):
        book = Book("b", "Title")
        with pytest.raises(AttributeError):
            book.title = "Other"

    def test_psalm_heading(self):
        assert Psalm("p", 5, "Title", "").heading == "Псалом 5: Title"

    def test_chapter_lookup(self, library):
        book = library.find_book("garden")
        assert book.chapter(2).title == "Water"
        assert book.chapter(9) is None
