"""Key/value storage for persisted client state.

Stands in for browser local storage: string keys, JSON-serialisable values.
The session token lives under ``ACCESS_TOKEN_KEY``.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "accessToken"
USER_KEY = "user"
AUTH_STORE_KEY = "auth-storage"


class KeyValueStorage(ABC):
    """Minimal local-storage interface."""

    @abstractmethod
    def get_item(self, key: str) -> Any | None: ...

    @abstractmethod
    def set_item(self, key: str, value: Any) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> None: ...

    def __contains__(self, key: str) -> bool:
        return self.get_item(key) is not None


class MemoryStorage(KeyValueStorage):
    """Storage that lives only as long as the process."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = dict(initial or {})

    def get_item(self, key: str) -> Any | None:
        return self._items.get(key)

    def set_item(self, key: str, value: Any) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(KeyValueStorage):
    """Storage persisted to a single JSON file.

    The file is re-read on every access so that several clients pointed at
    the same path observe each other's writes.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable storage file {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get_item(self, key: str) -> Any | None:
        return self._load().get(key)

    def set_item(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


def create_storage(path: Path | None) -> KeyValueStorage:
    """Return file-backed storage when a path is configured, memory otherwise."""
    if path is None:
        return MemoryStorage()
    return FileStorage(path)
