"""Shared fixtures for todo_context tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from storage.memory_backend import MemoryStorageBackend
from todo_context.container import TodoContainer
from todo_context.model import TodoRecord
from todo_context.tests.helpers import FakeClock


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory for testing."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def backend() -> MemoryStorageBackend:
    """Empty in-memory store, standing in for browser-style local storage."""
    return MemoryStorageBackend()


@pytest.fixture
def container(backend: MemoryStorageBackend, clock: FakeClock) -> TodoContainer:
    """Container over an empty store."""
    return TodoContainer(backend, clock=clock)


@pytest.fixture
def stored_records() -> list[TodoRecord]:
    """Eight records saved by an earlier session, in creation order.

    The fourth record was edited after creation, so its id no longer starts
    with its label.
    """
    return [
        {
            "id": "asds dsaddbsaddft1660138005899",
            "label": "asds dsaddbsaddft",
            "isCompleted": True,
            "created": 1660138005899,
        },
        {
            "id": "pouipiuoiuou1660138010767",
            "label": "pouipiuoiuou",
            "isCompleted": True,
            "created": 1660138010767,
        },
        {
            "id": "werewrewr1660138025187",
            "label": "werewrewr",
            "isCompleted": False,
            "created": 1660138025187,
        },
        {
            "id": "amfdfd1660138034979",
            "label": "dfgfdamfdfd",
            "isCompleted": True,
            "created": 1660138034979,
        },
        {
            "id": "iidfigdfigdf1660138040124",
            "label": "iidfigdfigdf",
            "isCompleted": True,
            "created": 1660138040124,
        },
        {
            "id": "bfsdfdsfds1660138042611",
            "label": "bfsdfdsfds",
            "isCompleted": False,
            "created": 1660138042611,
        },
        {
            "id": "12213fdgd1660140356843",
            "label": "12213fdgd",
            "isCompleted": False,
            "created": 1660140356843,
        },
        {
            "id": "test text1660307378285",
            "label": "test text",
            "isCompleted": False,
            "created": 1660307378285,
        },
    ]


@pytest.fixture
def stored_todo_list(stored_records: list[TodoRecord]) -> str:
    return json.dumps(stored_records)
