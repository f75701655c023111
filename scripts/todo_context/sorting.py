"""Filtering and ordering of todo items for display.

All functions are pure: they return new lists and never reorder their input.
"""

from __future__ import annotations

from collections.abc import Iterable

from todo_context.model import SortMode, TodoItem


def alphabet_key(item: TodoItem) -> str:
    # str.lower is locale-independent; ties fall back to input order
    return item.label.lower()


def filter_items(items: Iterable[TodoItem], hide_completed: bool) -> list[TodoItem]:
    if not hide_completed:
        return list(items)
    return [item for item in items if not item.is_completed]


def order_items(items: Iterable[TodoItem], mode: SortMode) -> list[TodoItem]:
    """Return items in display order for mode.

    items must be in canonical (creation) order. BY_DATE keeps that order,
    which is ascending by created for every list the container builds.
    ALPHABET_REVERSE is the ALPHABET result reversed, so the two are always
    exact mirror images, ties included.
    """
    if mode is SortMode.BY_DATE:
        return list(items)

    ordered = sorted(items, key=alphabet_key)
    if mode is SortMode.ALPHABET_REVERSE:
        ordered.reverse()
    return ordered
