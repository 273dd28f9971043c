"""Key-value persistence for reader state.

The reader keeps all of its state (settings, author uploads, bookmarks) as
string blobs under fixed keys, the way a browser app uses localStorage.
``JsonFileStore`` keeps the blobs in a single JSON document on disk.
"""

import json
import logging
from pathlib import Path
from typing import Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

log = logging.getLogger(__name__)

T = TypeVar("T")


class KeyValueStore(Protocol):
    """Opaque string storage keyed by name."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


def load_entries(raw: str | None, adapter: TypeAdapter[T], what: str) -> list[T]:
    """Decode a JSON list blob, validating each entry on its own.

    Entries that fail validation are logged and skipped so that one bad
    entry does not take the rest of the list with it.
    """
    if raw is None:
        return []
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as e:
        log.warning("Discarding unreadable %s: %s", what, e)
        return []
    if not isinstance(items, list):
        log.warning("Discarding %s: expected a list, got %s", what, type(items).__name__)
        return []

    entries: list[T] = []
    for index, item in enumerate(items):
        try:
            entries.append(adapter.validate_python(item))
        except ValidationError as e:
            log.warning("Skipping malformed %s entry %d: %s", what, index, e)
    return entries


class MemoryStore:
    """In-process store, used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStore:
    """Store backed by one JSON object on disk."""

    def __init__(self, path: Path):
        self.path = path
        self._data: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        """Load the store file, or start empty."""
        if self._data is not None:
            return self._data

        self._data = {}
        if self.path.exists():
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                log.warning("Could not read %s, starting empty: %s", self.path, e)
                return self._data

            if isinstance(raw, dict):
                self._data = {str(k): v for k, v in raw.items() if isinstance(v, str)}
            else:
                log.warning("Ignoring %s: expected a JSON object", self.path)

        return self._data

    def _save(self) -> None:
        """Write the store file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = self._load()
        self.path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        self._load()[key] = value
        self._save()

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save()

    def keys(self) -> list[str]:
        return list(self._load())
