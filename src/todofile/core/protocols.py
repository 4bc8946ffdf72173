"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete storage
implementations.
"""

from __future__ import annotations

from typing import Protocol

from todofile.core.models import TodoList


class TodoRepository(Protocol):
    """Contract for todo-list storage backends.

    Any object that implements :meth:`load` and :meth:`save` satisfies
    this protocol structurally (no explicit inheritance required).
    Implementations must map backend-specific exceptions to
    :class:`~todofile.exceptions.StorageError` subclasses.
    """

    def load(self) -> TodoList:
        """Return the persisted list, bootstrapping empty storage if needed.

        Raises
        ------
        StorageError
            When the storage cannot be created or read.
        CorruptStorageError
            When the stored data cannot be decoded.
        """
        ...  # pragma: no cover

    def save(self, todos: TodoList) -> None:
        """Overwrite the persisted list with *todos*.

        Raises
        ------
        StorageError
            When the storage cannot be written.
        """
        ...  # pragma: no cover
