"""JSON file-based storage backend.

This module provides a storage backend that persists key-value pairs to a single
JSON object on disk. It uses atomic writes (temp file + os.replace) to ensure
data consistency.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


class JSONStorageBackend:
    """JSON file-based key-value store.

    Stores all keys in one JSON object whose values are strings. Uses atomic
    writes to prevent data corruption in case of unexpected failure during
    write operations.

    Attributes:
        store_file: The Path to the JSON store file.

    Example:
        backend = JSONStorageBackend(Path("/home/user/project/.todo/store.json"))
        backend.set("todo-list", "[]")
        raw = backend.get("todo-list")
    """

    def __init__(self, store_file: Path) -> None:
        """Initialize the JSON storage backend.

        Args:
            store_file: The path to the JSON store file.
        """
        self.store_file = store_file

    def _load(self) -> dict[str, str]:
        """Load the whole key-value mapping from the JSON file.

        Returns an empty dict if the file doesn't exist. If the file is corrupted
        (invalid JSON or not an object), also returns an empty dict so the store
        can start fresh. Non-string values are dropped.

        Returns:
            A dict of stored keys to string values.
        """
        if not self.store_file.exists():
            return {}

        try:
            with open(self.store_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            # If file is corrupted, not UTF-8 or unreadable, start fresh
            return {}

        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        """Atomically replace the JSON file with data.

        Creates the parent directory if needed and writes to a temporary file
        before atomically moving it to the final location.

        Args:
            data: The complete mapping to write.

        Raises:
            OSError: If there's an error creating directories or writing files.
        """
        self.store_file.parent.mkdir(parents=True, exist_ok=True)

        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.store_file.parent, suffix=".tmp"
        )
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.store_file)  # Atomic on POSIX
        except (OSError, TypeError, ValueError):
            # Clean up temp file on failure
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Store value under key.

        Raises:
            OSError: If the file cannot be written.
        """
        data = self._load()
        data[key] = str(value)
        self._write(data)

    def remove(self, key: str) -> None:
        """Delete key. The file is left untouched if key is absent.

        Raises:
            OSError: If the file cannot be written.
        """
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._write(data)

    def clear(self) -> None:
        """Delete every key by writing an empty object.

        Raises:
            OSError: If the file cannot be written.
        """
        self._write({})
