"""Exceptions raised by todo_context."""

from __future__ import annotations


class TodoContextError(Exception):
    """Base class for todo_context errors."""


class ValidationError(TodoContextError, ValueError):
    """A label was empty or whitespace-only. State is left unchanged."""


class DeserializationError(TodoContextError, ValueError):
    """Persisted data could not be decoded into the expected shape."""
