"""Domain models for todofile.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  A todo's id is never stored: it is the
todo's zero-based position inside the enclosing :class:`TodoList`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Single record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Todo:
    """A single task record."""

    title: str
    """Human-readable task title.  Non-empty when created via the CLI."""

    status: bool = False
    """``True`` once the task is done, ``False`` while pending."""


# ---------------------------------------------------------------------------
# Ordered collection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TodoList:
    """Immutable, ordered collection of :class:`Todo` entries.

    Insertion order is both display order and storage order.  Operations
    never mutate an instance; they build a new one.
    """

    todos: tuple[Todo, ...] = ()

    def __len__(self) -> int:
        return len(self.todos)

    def __bool__(self) -> bool:
        return len(self.todos) > 0

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.todos)

    def __getitem__(self, index: int) -> Todo:
        return self.todos[index]
