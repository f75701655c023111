"""In-memory storage backend.

Keeps values in a plain dict for the lifetime of the process. Useful for tests
and for sessions that should not touch the disk.
"""

from __future__ import annotations


class MemoryStorageBackend:
    """Dict-backed key-value store.

    Example:
        backend = MemoryStorageBackend()
        backend.set("sorting", '"BY_DATE"')
        backend.get("sorting")
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
