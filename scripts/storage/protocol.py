"""Protocols for key-value storage backends.

This module defines the interface shared by every storage backend. All backends
must implement the KeyValueStore protocol.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Protocol for synchronous string key-value stores.

    Keys and values are plain strings. Raw backends may raise when the
    underlying medium fails; wrap them in storage.adapter.PersistentStore
    to get the never-fail contract.
    """

    def get(self, key: str) -> str | None:
        """Return the value stored under key.

        Args:
            key: The key to look up.

        Returns:
            The stored string, or None if the key is absent.

        Raises:
            OSError: If there's a file system error reading the storage.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Args:
            key: The key to write.
            value: The string value to store.

        Raises:
            OSError: If there's a file system error writing the storage.
        """
        ...

    def remove(self, key: str) -> None:
        """Delete key. Removing a missing key is a no-op.

        Args:
            key: The key to delete.

        Raises:
            OSError: If there's a file system error writing the storage.
        """
        ...

    def clear(self) -> None:
        """Delete every key in the store.

        Raises:
            OSError: If there's a file system error writing the storage.
        """
        ...
