"""The todo state container.

TodoContainer owns the canonical todo list (creation order) and the current
sort mode, keeps both synchronised with a key-value store, and computes the
ordered, filtered view a UI renders.

Example:
    from storage import MemoryStorageBackend
    from todo_context import TodoContainer

    todos = TodoContainer(MemoryStorageBackend())
    item = todos.create("Buy milk")
    todos.toggle(item.id)
    todos.cycle_sort_mode()
    labels = [t.label for t in todos.view()]
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storage.adapter import PersistentStore
from storage.protocol import KeyValueStore
from todo_context.codec import (
    SORTING_KEY,
    TODO_LIST_KEY,
    decode_sort_mode,
    decode_todo_list,
    encode_sort_mode,
    encode_todo_list,
)
from todo_context.errors import DeserializationError, ValidationError
from todo_context.model import SortMode, TodoItem, make_todo_id, now_millis
from todo_context.sorting import filter_items, order_items

logger = logging.getLogger(__name__)

DEFAULT_SORT_MODE: SortMode = SortMode.BY_DATE


def _require_label(label: object) -> str:
    """Return the trimmed label.

    Raises:
        ValidationError: If label is not a string or is blank.
    """
    if not isinstance(label, str) or not label.strip():
        raise ValidationError("Todo label must not be empty")
    return label.strip()


class TodoContainer:
    """Canonical todo state plus its persisted copy.

    Every mutating call updates memory and writes both persisted entries
    before returning. view() is recomputed from canonical state on each call.

    Attributes:
        store: The fail-safe store both entries are written to.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Create a container and load its state from store.

        Args:
            store: Any key-value store. Raw backends are wrapped in
                PersistentStore so storage failures never reach callers.
            clock: Returns the current time in milliseconds. Defaults to
                the wall clock.
        """
        if not isinstance(store, PersistentStore):
            store = PersistentStore(store)
        self.store = store
        self._clock = clock or now_millis
        self._todos: list[TodoItem] = []
        self._sort_mode: SortMode = DEFAULT_SORT_MODE
        self._hide_completed = False
        self.initialize()

    # -------------------------------------------------------------------------
    # Loading and saving
    # -------------------------------------------------------------------------

    def initialize(self) -> None:
        """(Re)load the todo list and sort mode from the store.

        Missing or malformed entries fall back to an empty list and BY_DATE.
        """
        self._todos = self._load_todos()
        self._sort_mode = self._load_sort_mode()
        self._hide_completed = False
        logger.debug(
            "Loaded %d todos, sort mode %s", len(self._todos), self._sort_mode.value
        )

    def _load_todos(self) -> list[TodoItem]:
        raw = self.store.get(TODO_LIST_KEY)
        if raw is None:
            return []
        try:
            return decode_todo_list(raw)
        except DeserializationError as e:
            logger.warning("Ignoring stored %r: %s", TODO_LIST_KEY, e)
            return []

    def _load_sort_mode(self) -> SortMode:
        raw = self.store.get(SORTING_KEY)
        if raw is None:
            return DEFAULT_SORT_MODE
        try:
            return decode_sort_mode(raw)
        except DeserializationError as e:
            logger.warning("Ignoring stored %r: %s", SORTING_KEY, e)
            return DEFAULT_SORT_MODE

    def _persist(self) -> None:
        self.store.set(TODO_LIST_KEY, encode_todo_list(self._todos))
        self.store.set(SORTING_KEY, encode_sort_mode(self._sort_mode))

    def _index_of(self, todo_id: str) -> int | None:
        for index, item in enumerate(self._todos):
            if item.id == todo_id:
                return index
        return None

    def _next_created(self, label: str) -> int:
        """Pick a creation time that keeps order and ids unique.

        Never earlier than the newest item, and bumped one millisecond at a
        time while label + created would collide with an existing id.
        """
        created = self._clock()
        if self._todos:
            created = max(created, self._todos[-1].created)
        taken = {item.id for item in self._todos}
        while make_todo_id(label, created) in taken:
            created += 1
        return created

    # -------------------------------------------------------------------------
    # Intents
    # -------------------------------------------------------------------------

    def create(self, label: str) -> TodoItem:
        """Append a new, pending todo to the end of the list.

        Raises:
            ValidationError: If label is empty after trimming.
        """
        text = _require_label(label)
        created = self._next_created(text)
        item = TodoItem(id=make_todo_id(text, created), label=text, created=created)
        self._todos.append(item)
        self._persist()
        logger.debug("Created todo %r", item.id)
        return item

    def toggle(self, todo_id: str) -> TodoItem | None:
        """Flip is_completed on the matching todo.

        Returns:
            The updated item, or None if no todo has that id.
        """
        index = self._index_of(todo_id)
        if index is None:
            logger.debug("Toggle ignored, no todo %r", todo_id)
            return None
        item = self._todos[index].toggled()
        self._todos[index] = item
        self._persist()
        logger.debug("Toggled todo %r to completed=%s", todo_id, item.is_completed)
        return item

    def edit(self, todo_id: str, new_label: str) -> TodoItem | None:
        """Replace the label of the matching todo. Its id is kept.

        Returns:
            The updated item, or None if no todo has that id.

        Raises:
            ValidationError: If new_label is empty after trimming. The todo
                keeps its previous label.
        """
        text = _require_label(new_label)
        index = self._index_of(todo_id)
        if index is None:
            logger.debug("Edit ignored, no todo %r", todo_id)
            return None
        item = self._todos[index].relabeled(text)
        self._todos[index] = item
        self._persist()
        logger.debug("Edited todo %r", todo_id)
        return item

    def remove(self, todo_id: str) -> bool:
        """Delete the matching todo.

        Returns:
            True if a todo was removed, False if none had that id.
        """
        index = self._index_of(todo_id)
        if index is None:
            return False
        del self._todos[index]
        self._persist()
        logger.debug("Removed todo %r", todo_id)
        return True

    def cycle_sort_mode(self) -> SortMode:
        """Advance to the next sort mode and persist it."""
        self._sort_mode = self._sort_mode.next()
        self._persist()
        logger.debug("Sort mode is now %s", self._sort_mode.value)
        return self._sort_mode

    def set_hide_completed(self, flag: bool) -> None:
        """Show or hide completed todos in view(). Not persisted."""
        self._hide_completed = bool(flag)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def view(self) -> tuple[TodoItem, ...]:
        """Return the todos to display: filtered, then ordered by sort mode."""
        visible = filter_items(self._todos, self._hide_completed)
        return tuple(order_items(visible, self._sort_mode))

    def current_sort_mode(self) -> SortMode:
        return self._sort_mode

    def count(self) -> int:
        """Number of todos, including hidden completed ones."""
        return len(self._todos)

    @property
    def hide_completed(self) -> bool:
        return self._hide_completed

    @property
    def todos(self) -> tuple[TodoItem, ...]:
        """All todos in creation order."""
        return tuple(self._todos)

    def get(self, todo_id: str) -> TodoItem | None:
        index = self._index_of(todo_id)
        return None if index is None else self._todos[index]
