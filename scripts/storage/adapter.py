"""Fail-safe wrapper around a raw storage backend.

Raw backends raise when their medium fails (missing permissions, full disk,
locked database). PersistentStore absorbs those failures so callers see an
unavailable store exactly like an empty one.
"""

from __future__ import annotations

import logging
import sqlite3

from storage.protocol import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_ERRORS: tuple[type[Exception], ...] = (OSError, sqlite3.Error)


class PersistentStore:
    """KeyValueStore that never raises on storage failure.

    Reads from a failing backend return None; writes to a failing backend are
    dropped. The failure is logged and kept in last_error.

    Attributes:
        backend: The wrapped raw backend.
        last_error: The exception raised by the most recent failed operation,
            or None if the most recent operation succeeded.
    """

    def __init__(self, backend: KeyValueStore) -> None:
        self.backend = backend
        self.last_error: Exception | None = None

    @property
    def available(self) -> bool:
        """True if the last operation reached the backing store."""
        return self.last_error is None

    def _failed(self, action: str, key: str | None, exc: Exception) -> None:
        self.last_error = exc
        logger.warning(
            "Storage %s failed for key %r on %s: %r",
            action,
            key,
            type(self.backend).__name__,
            exc,
        )

    def get(self, key: str) -> str | None:
        try:
            value = self.backend.get(key)
        except STORAGE_ERRORS as e:
            self._failed("get", key, e)
            return None
        self.last_error = None
        return value

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(
                f"Stored values must be str, got {type(value).__name__}"
            )
        try:
            self.backend.set(key, value)
        except STORAGE_ERRORS as e:
            self._failed("set", key, e)
            return
        self.last_error = None

    def remove(self, key: str) -> None:
        try:
            self.backend.remove(key)
        except STORAGE_ERRORS as e:
            self._failed("remove", key, e)
            return
        self.last_error = None

    def clear(self) -> None:
        try:
            self.backend.clear()
        except STORAGE_ERRORS as e:
            self._failed("clear", None, e)
            return
        self.last_error = None
