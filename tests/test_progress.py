"""Tests for reading progress persistence."""

import json

from library_tui.progress import STORAGE_KEY, ProgressStore


class TestProgressStore:
    """Test ProgressStore load/save."""

    def test_missing_file_is_empty(self, tmp_path):
        store = ProgressStore(tmp_path / "none.json")
        store.load()
        assert len(store) == 0
        assert store.get("book1") is None

    def test_record_persists_whole_mapping(self, tmp_path):
        """Every record writes all entries under the storage key."""
        path = tmp_path / "sub" / "progress.json"
        store = ProgressStore(path)
        store.record("book1", 2)
        store.record("book2", 1)
        store.record("book1", 3)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {
            STORAGE_KEY: {
                "book1": {"chapterNumber": 3},
                "book2": {"chapterNumber": 1},
            }
        }

    def test_roundtrip(self, tmp_path):
        path = tmp_path / "progress.json"
        ProgressStore(path).record("book2", 2)

        store = ProgressStore(path)
        store.load()
        assert store.get("book2") == 2
        assert store.to_dict() == {"book2": {"chapterNumber": 2}}

    def test_invalid_json_is_empty(self, tmp_path):
        """Corrupt files are treated as no progress."""
        path = tmp_path / "progress.json"
        path.write_text("{not json", encoding="utf-8")
        store = ProgressStore(path)
        store.load()
        assert len(store) == 0

    def test_wrong_shape_is_empty(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        store = ProgressStore(path)
        store.load()
        assert len(store) == 0

    def test_bad_entries_dropped(self, tmp_path):
        """Entries without an integer chapter are ignored."""
        path = tmp_path / "progress.json"
        path.write_text(json.dumps({STORAGE_KEY: {
            "good": {"chapterNumber": 4},
            "text": {"chapterNumber": "4"},
            "flag": {"chapterNumber": True},
            "empty": {},
        }}), encoding="utf-8")
        store = ProgressStore(path)
        store.load()
        assert store.to_dict() == {"good": {"chapterNumber": 4}}

    def test_non_object_entry_keeps_others(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_text(json.dumps({STORAGE_KEY: {
            "good": {"chapterNumber": 4},
            "bad": 3,
        }}), encoding="utf-8")
        store = ProgressStore(path)
        store.load()
        assert store.get("good") == 4
        assert store.get("bad") is None

    def test_undecodable_file_is_empty(self, tmp_path):
        """Bytes that are not UTF-8 count as no progress."""
        path = tmp_path / "progress.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        store = ProgressStore(path)
        store.load()
        assert len(store) == 0

    def test_load_replaces_memory(self, tmp_path):
        path = tmp_path / "progress.json"
        store = ProgressStore(path)
        store.record("a", 1)
        path.unlink()
        store.load()
        assert store.get("a") is None

    def test_unwritable_path_does_not_raise(self, tmp_path):
        """A failed save keeps the in-memory entry."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        store = ProgressStore(blocker / "progress.json")
        store.record("book1", 2)
        assert store.get("book1") == 2
