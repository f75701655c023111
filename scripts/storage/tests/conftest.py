"""Shared fixtures and utilities for storage backend tests.

This module provides common test fixtures used across all storage backend tests,
including sample data, temporary directories, and parameterized backend instances.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from storage.json_backend import JSONStorageBackend
from storage.memory_backend import MemoryStorageBackend
from storage.protocol import KeyValueStore
from storage.sqlite_backend import SQLiteStorageBackend


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory for testing.

    Returns:
        Path to a clean temporary directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def sample_todo_list() -> str:
    """Serialized todo list as the container writes it.

    Returns:
        A JSON array string with two records.
    """
    return json.dumps(
        [
            {
                "id": "Task 11660138005899",
                "label": "Task 1",
                "isCompleted": False,
                "created": 1660138005899,
            },
            {
                "id": "Task 21660138010767",
                "label": "Task 2",
                "isCompleted": True,
                "created": 1660138010767,
            },
        ]
    )


@pytest.fixture
def sample_pairs(sample_todo_list: str) -> dict[str, str]:
    """Both persisted entries of a todo container.

    Returns:
        A dict of store keys to serialized values.
    """
    return {
        "todo-list": sample_todo_list,
        "sorting": json.dumps("ALPHABET"),
    }


@pytest.fixture(params=["memory", "json", "sqlite"])
def storage_backend(request, tmp_project: Path) -> KeyValueStore:
    """Parameterized fixture providing every storage backend type.

    This fixture enables cross-backend compliance testing by running
    the same tests against all implementations.

    Args:
        request: Pytest request object with param.
        tmp_project: Temporary project directory.

    Returns:
        A memory, JSON or SQLite backend instance.
    """
    if request.param == "memory":
        return MemoryStorageBackend()
    elif request.param == "json":
        return JSONStorageBackend(tmp_project / "store.json")
    else:
        return SQLiteStorageBackend(tmp_project / "store.db")


@pytest.fixture
def memory_backend() -> MemoryStorageBackend:
    """Create an empty in-memory backend."""
    return MemoryStorageBackend()


@pytest.fixture
def json_backend(tmp_project: Path) -> JSONStorageBackend:
    """Create a JSON storage backend for JSON-specific tests.

    Args:
        tmp_project: Temporary project directory.

    Returns:
        An instance of JSONStorageBackend.
    """
    return JSONStorageBackend(tmp_project / "store.json")


@pytest.fixture
def sqlite_backend(tmp_project: Path) -> SQLiteStorageBackend:
    """Create a SQLite storage backend for SQLite-specific tests.

    Args:
        tmp_project: Temporary project directory.

    Returns:
        An instance of SQLiteStorageBackend.
    """
    return SQLiteStorageBackend(tmp_project / "store.db")
