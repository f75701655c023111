"""Data model for the todo container.

TodoItem is an immutable value object; the container replaces items instead of
mutating them, so anything handed out by view() cannot alter canonical state.
TodoRecord is the persisted shape of one item.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import TypedDict


class TodoRecord(TypedDict):
    """Structure of one item in the persisted "todo-list" array.

    Attributes:
        id: Label concatenated with the creation timestamp.
        label: The task text.
        isCompleted: Whether the task is checked off.
        created: Creation time in milliseconds since the epoch.
    """

    id: str
    label: str
    isCompleted: bool
    created: int


class SortMode(str, Enum):
    """Display ordering, cycled BY_DATE -> ALPHABET -> ALPHABET_REVERSE."""

    BY_DATE = "BY_DATE"
    ALPHABET = "ALPHABET"
    ALPHABET_REVERSE = "ALPHABET_REVERSE"

    @property
    def heading(self) -> str:
        """Header text shown next to "Sort tasks by:"."""
        return _SORT_HEADINGS[self]

    def next(self) -> SortMode:
        modes = list(SortMode)
        return modes[(modes.index(self) + 1) % len(modes)]


_SORT_HEADINGS = {
    SortMode.BY_DATE: "CREATION DATE",
    SortMode.ALPHABET: "ALPHABET",
    SortMode.ALPHABET_REVERSE: "ALPHABET-REVERSE",
}


def now_millis() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def make_todo_id(label: str, created: int) -> str:
    return f"{label}{created}"


@dataclass(frozen=True)
class TodoItem:
    id: str
    label: str
    is_completed: bool = False
    created: int = 0

    def toggled(self) -> TodoItem:
        return replace(self, is_completed=not self.is_completed)

    def relabeled(self, label: str) -> TodoItem:
        return replace(self, label=label)

    def to_record(self) -> TodoRecord:
        return {
            "id": self.id,
            "label": self.label,
            "isCompleted": self.is_completed,
            "created": self.created,
        }
