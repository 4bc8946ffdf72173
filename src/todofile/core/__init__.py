"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
"""

from todofile.core.models import Todo, TodoList
from todofile.core.protocols import TodoRepository
from todofile.core.todo_service import TodoService

__all__: list[str] = [
    "Todo",
    "TodoList",
    "TodoRepository",
    "TodoService",
]
