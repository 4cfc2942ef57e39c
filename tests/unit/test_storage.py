"""Unit tests for key/value storage backends."""

from pathlib import Path

import pytest_check as check

from wellnessai.storage import (
    ACCESS_TOKEN_KEY,
    FileStorage,
    MemoryStorage,
    create_storage,
)


class TestMemoryStorage:
    def test_set_get_remove(self) -> None:
        storage = MemoryStorage()

        storage.set_item(ACCESS_TOKEN_KEY, "abc")
        check.equal(storage.get_item(ACCESS_TOKEN_KEY), "abc")
        check.is_in(ACCESS_TOKEN_KEY, storage)

        storage.remove_item(ACCESS_TOKEN_KEY)
        check.is_none(storage.get_item(ACCESS_TOKEN_KEY))
        check.is_not_in(ACCESS_TOKEN_KEY, storage)

    def test_remove_missing_key_is_noop(self) -> None:
        storage = MemoryStorage({"a": 1})

        storage.remove_item("missing")

        assert storage.get_item("a") == 1


class TestFileStorage:
    def test_persists_across_instances(self, tmp_path: Path) -> None:
        """A second storage over the same file sees earlier writes."""
        path = tmp_path / "nested" / "storage.json"
        FileStorage(path).set_item("auth-storage", {"isAuthenticated": True})

        check.equal(FileStorage(path).get_item("auth-storage"), {"isAuthenticated": True})
        check.is_true(path.exists())

    def test_unreadable_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")

        storage = FileStorage(path)

        check.is_none(storage.get_item(ACCESS_TOKEN_KEY))
        storage.set_item(ACCESS_TOKEN_KEY, "t")
        check.equal(storage.get_item(ACCESS_TOKEN_KEY), "t")

    def test_remove_item(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "storage.json")
        storage.set_item("a", 1)
        storage.set_item("b", 2)

        storage.remove_item("a")

        check.is_none(storage.get_item("a"))
        check.equal(storage.get_item("b"), 2)


def test_create_storage_picks_backend(tmp_path: Path) -> None:
    check.is_instance(create_storage(None), MemoryStorage)
    check.is_instance(create_storage(tmp_path / "s.json"), FileStorage)
