"""Small helpers shared by the todo_context tests."""

from __future__ import annotations

from collections.abc import Iterable

from todo_context.model import TodoItem


class FakeClock:
    """Deterministic millisecond clock that advances on every call."""

    def __init__(self, start: int = 1660138000000, step: int = 1000) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


def labels(items: Iterable[TodoItem]) -> list[str]:
    return [item.label for item in items]
