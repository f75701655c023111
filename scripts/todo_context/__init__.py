"""Todo state container: model, persistence and display ordering.

Example:
    from pathlib import Path
    from todo_context import create_container

    todos = create_container(Path("/home/user/project"))
    todos.create("Write report")
    for item in todos.view():
        print(item.label, item.is_completed)
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from storage import open_store
from todo_context.codec import SORTING_KEY, TODO_LIST_KEY
from todo_context.container import TodoContainer
from todo_context.errors import DeserializationError, TodoContextError, ValidationError
from todo_context.log import configure_logging
from todo_context.model import SortMode, TodoItem, TodoRecord

__all__ = [
    "SORTING_KEY",
    "TODO_LIST_KEY",
    "DeserializationError",
    "SortMode",
    "TodoContainer",
    "TodoContextError",
    "TodoItem",
    "TodoRecord",
    "ValidationError",
    "configure_logging",
    "create_container",
]


def create_container(
    project_dir: Path, clock: Callable[[], int] | None = None
) -> TodoContainer:
    """Build a container over the store configured for project_dir.

    Raises:
        ValueError: If the storage configuration is invalid.
    """
    return TodoContainer(open_store(project_dir), clock=clock)
