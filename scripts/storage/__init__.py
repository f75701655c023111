"""Storage backend factory and exports for todo-context.

This module provides a factory function to get the appropriate key-value storage
backend based on the TODO_STORAGE_BACKEND environment variable.

Supported backends:
    - "json" (default): JSON file-based storage
    - "sqlite": SQLite database storage
    - "memory": process-local dict, nothing written to disk

Environment Variables:
    TODO_STORAGE_BACKEND: "json" (default), "sqlite" or "memory"
    TODO_STORE_PATH: Custom path for JSON backend (relative or absolute)
    TODO_SQLITE_PATH: Custom path for SQLite backend (relative or absolute)

Example:
    from storage import open_store
    from pathlib import Path

    store = open_store(Path("/home/user/project"))
    raw = store.get("todo-list")
    store.set("sorting", '"ALPHABET"')
"""

from __future__ import annotations

import os
from pathlib import Path

from storage.adapter import PersistentStore
from storage.json_backend import JSONStorageBackend
from storage.memory_backend import MemoryStorageBackend
from storage.protocol import KeyValueStore
from storage.sqlite_backend import SQLiteStorageBackend

__all__ = [
    "KeyValueStore",
    "PersistentStore",
    "JSONStorageBackend",
    "MemoryStorageBackend",
    "SQLiteStorageBackend",
    "get_storage_backend",
    "open_store",
    "_resolve_safe_path",
]


def _resolve_safe_path(base_dir: Path, user_path: str) -> Path | None:
    """Resolve a path, ensuring it stays within base_dir.

    Args:
        base_dir: The base directory paths must stay within.
        user_path: User-provided path (relative or absolute).

    Returns:
        Resolved absolute path, or None if path escapes base_dir.
    """
    if not user_path or not user_path.strip():
        return None

    if "\x00" in user_path:
        return None

    candidate = Path(user_path)
    if not candidate.is_absolute():
        candidate = base_dir / candidate

    # Resolve to absolute, following symlinks
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()

    # Ensure path is within project directory
    try:
        resolved.relative_to(base_resolved)
        return resolved
    except ValueError:
        return None  # Path escapes project directory


def _get_path_from_env(project_dir: Path, env_var: str, default: Path) -> Path:
    """Read a store path from env_var, falling back to default.

    Raises:
        ValueError: If the configured path escapes project directory.
    """
    custom_path = os.environ.get(env_var, "").strip()

    if custom_path:
        safe_path = _resolve_safe_path(project_dir, custom_path)
        if safe_path is None:
            raise ValueError(f"{env_var} '{custom_path}' escapes project directory")
        return safe_path

    return default


def get_storage_backend(project_dir: Path) -> KeyValueStore:
    """Get the configured raw storage backend.

    Reads the TODO_STORAGE_BACKEND environment variable to determine which
    backend to use. Defaults to JSON if not set.

    Path configuration:
        - JSON backend: Uses TODO_STORE_PATH or defaults to .todo/store.json
        - SQLite backend: Uses TODO_SQLITE_PATH or defaults to .todo/store.db

    Args:
        project_dir: The project root directory used for resolving paths.

    Returns:
        An instance of the configured backend.

    Raises:
        ValueError: If the storage backend or path configuration is invalid.
    """
    backend_type = os.environ.get("TODO_STORAGE_BACKEND", "json").strip().lower()

    if backend_type == "json":
        store_file = _get_path_from_env(
            project_dir, "TODO_STORE_PATH", project_dir / ".todo" / "store.json"
        )
        return JSONStorageBackend(store_file)
    elif backend_type == "sqlite":
        db_path = _get_path_from_env(
            project_dir, "TODO_SQLITE_PATH", project_dir / ".todo" / "store.db"
        )
        return SQLiteStorageBackend(db_path)
    elif backend_type == "memory":
        return MemoryStorageBackend()
    else:
        raise ValueError(
            f"Unknown storage backend: {backend_type!r}. "
            f"Expected 'json', 'sqlite' or 'memory'."
        )


def open_store(project_dir: Path) -> PersistentStore:
    """Return the configured backend wrapped so that it never raises.

    Raises:
        ValueError: If the storage backend or path configuration is invalid.
    """
    return PersistentStore(get_storage_backend(project_dir))
