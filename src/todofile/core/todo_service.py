"""Core todo service — one load, one operation, one save.

:class:`TodoService` is the seam the CLI layer talks to.  It depends on
a :class:`~todofile.core.protocols.TodoRepository` injected at
construction time, keeping the core free of filesystem imports.

Guarantees
----------
* No ``print()``; rendering belongs to the CLI layer.
* A failing operation raises before :meth:`TodoRepository.save` runs,
  so the stored list is never rewritten by a failed command.
* Only :class:`~todofile.exceptions.TodofileError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from todofile.core import operations
from todofile.core.models import TodoList
from todofile.core.protocols import TodoRepository
from todofile.exceptions import StorageError, TodofileError

logger = logging.getLogger(__name__)


class TodoService:
    """Apply todo operations against a repository.

    Parameters
    ----------
    repository:
        Any object satisfying the :class:`TodoRepository` protocol.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository: TodoRepository = repository

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_todos(self) -> TodoList:
        """Return the stored list without modifying it."""
        return self._load()

    def add(self, title: str) -> TodoList:
        """Append a pending todo and persist the result."""
        return self._apply("add", lambda todos: operations.add_todo(todos, title))

    def mark_done(self, todo_id: int) -> TodoList:
        """Mark the todo at *todo_id* as done and persist the result."""
        return self._apply(
            "done", lambda todos: operations.mark_done_by_id(todos, todo_id),
        )

    def delete(self, todo_id: int) -> TodoList:
        """Delete the todo at *todo_id* and persist the result."""
        return self._apply(
            "delete", lambda todos: operations.delete_todo_by_id(todos, todo_id),
        )

    # ------------------------------------------------------------------
    # Repository delegation (safe boundary)
    # ------------------------------------------------------------------

    def _apply(
        self,
        command: str,
        operation: Callable[[TodoList], TodoList],
    ) -> TodoList:
        todos = self._load()
        updated = operation(todos)
        self._save(updated)
        logger.info("%s applied; %d todo(s) stored", command, len(updated))
        return updated

    def _load(self) -> TodoList:
        """Call the repository and ensure only our exceptions escape."""
        try:
            return self._repository.load()
        except TodofileError:
            raise
        except Exception as exc:
            raise StorageError(f"Unexpected storage error: {exc}") from exc

    def _save(self, todos: TodoList) -> None:
        try:
            self._repository.save(todos)
        except TodofileError:
            raise
        except Exception as exc:
            raise StorageError(f"Unexpected storage error: {exc}") from exc
