"""Encoding and decoding of the two persisted entries.

Storage layout:
    "todo-list": JSON array of TodoRecord objects, in creation order.
    "sorting":   JSON string holding a SortMode tag, e.g. "ALPHABET".
                 A JSON integer 0-2 (index in the sort cycle) is also accepted
                 when reading.
"""

from __future__ import annotations

import json
from typing import Any

from todo_context.errors import DeserializationError
from todo_context.model import SortMode, TodoItem, TodoRecord

TODO_LIST_KEY: str = "todo-list"
SORTING_KEY: str = "sorting"


def _is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def validate_record(item: Any) -> bool:
    """Check a decoded JSON value has the TodoRecord shape."""
    if not isinstance(item, dict):
        return False
    return (
        isinstance(item.get("id"), str)
        and isinstance(item.get("label"), str)
        and item["label"].strip() != ""
        and isinstance(item.get("isCompleted"), bool)
        and _is_int(item.get("created"))
    )


def item_from_record(record: TodoRecord) -> TodoItem:
    return TodoItem(
        id=record["id"],
        label=record["label"],
        is_completed=record["isCompleted"],
        created=int(record["created"]),
    )


def encode_todo_list(items: list[TodoItem] | tuple[TodoItem, ...]) -> str:
    return json.dumps([item.to_record() for item in items], ensure_ascii=False)


def decode_todo_list(raw: str) -> list[TodoItem]:
    """Decode the "todo-list" entry.

    Raises:
        DeserializationError: If raw is not JSON, not an array, or any element
            does not have the TodoRecord shape. The whole list is rejected.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise DeserializationError(f"todo list is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise DeserializationError(
            f"todo list must be a JSON array, got {type(data).__name__}"
        )

    for index, record in enumerate(data):
        if not validate_record(record):
            raise DeserializationError(f"invalid todo record at index {index}")

    return [item_from_record(record) for record in data]


def encode_sort_mode(mode: SortMode) -> str:
    return json.dumps(mode.value)


def decode_sort_mode(raw: str) -> SortMode:
    """Decode the "sorting" entry.

    Raises:
        DeserializationError: If raw is not JSON or names no known SortMode.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise DeserializationError(f"sort mode is not valid JSON: {e}") from e

    if isinstance(data, str):
        try:
            return SortMode(data)
        except ValueError:
            raise DeserializationError(f"unknown sort mode: {data!r}") from None

    modes = list(SortMode)
    if _is_int(data) and 0 <= int(data) < len(modes):
        return modes[int(data)]

    raise DeserializationError(f"unknown sort mode: {data!r}")
