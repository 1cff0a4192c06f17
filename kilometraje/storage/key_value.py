"""Key-value storage backends.

The record and profile stores only need three primitives: read a string
under a key, write a string under a key and delete a key. This module
defines that contract and two backends:

- InMemoryKeyValueStore: a dictionary, for tests and throwaway sessions
- JsonFileKeyValueStore: one JSON object on disk, written atomically
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a key-value store cannot be written."""

    pass


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal persistent key-value contract."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Dictionary-backed key-value store.

    Example:
        >>> store = InMemoryKeyValueStore()
        >>> store.set("k", "v")
        >>> store.get("k")
        'v'
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)


class JsonFileKeyValueStore:
    """Key-value store persisted as a single JSON object file.

    Every write rewrites the whole file through a temporary file and an
    atomic rename, so an interrupted write never leaves a truncated file
    behind. A missing or corrupt file reads as an empty store.

    Attributes:
        file_path: Location of the JSON file

    Example:
        >>> store = JsonFileKeyValueStore("data/storage.json")
        >>> store.set("nombreUsuario", "Ana")
        >>> JsonFileKeyValueStore("data/storage.json").get("nombreUsuario")
        'Ana'
    """

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def _read_all(self) -> Dict[str, str]:
        if not self.file_path.exists():
            return {}

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            logger.warning(f"Storage file {self.file_path} is corrupted, ignoring: {e}")
            return {}
        except OSError as e:
            logger.warning(f"Failed to read storage file {self.file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(
                f"Storage file {self.file_path} does not hold a JSON object, ignoring"
            )
            return {}
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.file_path.parent, suffix=".tmp"
            )
        except OSError as e:
            raise StorageError(f"Cannot write {self.file_path}: {e}") from e

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.file_path)
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                # Temp file may already be gone
                pass
            raise StorageError(f"Cannot write {self.file_path}: {e}") from e

        logger.debug(f"Saved {len(data)} key(s) to {self.file_path}")
