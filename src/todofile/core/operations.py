"""Pure todo-list operations.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  Each mutating operation returns a
new :class:`~todofile.core.models.TodoList` and leaves its input intact.

Ids are positional: ``todo_id`` is the zero-based index of the todo in
the list, so deleting an entry shifts every later id down by one.
"""

from __future__ import annotations

from dataclasses import replace

from todofile.core.models import Todo, TodoList
from todofile.exceptions import NotFoundError, RangeError, ValidationError

EMPTY_LIST_MESSAGE: str = "No todo available"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_id(todos: TodoList, todo_id: int) -> None:
    """Raise :class:`RangeError` unless ``0 <= todo_id < len(todos)``."""
    if todo_id < 0:
        raise RangeError("ID must be at least 0")
    if todo_id >= len(todos):
        hint = (
            "The list is empty; add a todo first."
            if not todos
            else f"Valid ids are 0 to {len(todos) - 1}."
        )
        raise RangeError("ID not found", hint=hint)


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

def add_todo(todos: TodoList, title: str) -> TodoList:
    """Append a pending todo titled *title*.

    Raises
    ------
    ValidationError
        If *title* is empty.
    """
    if title == "":
        raise ValidationError("Title required", hint="Pass a title with -title.")
    return TodoList(todos=(*todos.todos, Todo(title=title)))


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------

def find_todo_by_id(todos: TodoList, todo_id: int) -> Todo:
    """Return the todo at position *todo_id*."""
    validate_id(todos, todo_id)
    for index, todo in enumerate(todos):
        if index == todo_id:
            return todo
    # Unreachable once the range check has passed.
    raise NotFoundError("Todo not found")


# ---------------------------------------------------------------------------
# Update / delete
# ---------------------------------------------------------------------------

def update_todo_by_id(todos: TodoList, new_todo: Todo, todo_id: int) -> TodoList:
    """Return a copy of *todos* with position *todo_id* replaced."""
    validate_id(todos, todo_id)
    return TodoList(
        todos=tuple(
            new_todo if index == todo_id else todo
            for index, todo in enumerate(todos)
        )
    )


def mark_done_by_id(todos: TodoList, todo_id: int) -> TodoList:
    """Mark the todo at *todo_id* as done.  Already-done todos stay done."""
    todo = find_todo_by_id(todos, todo_id)
    return update_todo_by_id(todos, replace(todo, status=True), todo_id)


def delete_todo_by_id(todos: TodoList, todo_id: int) -> TodoList:
    """Return a copy of *todos* without the entry at *todo_id*."""
    validate_id(todos, todo_id)
    return TodoList(todos=todos.todos[:todo_id] + todos.todos[todo_id + 1:])


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def transform_status(status: bool) -> str:
    """Render a status flag as ``"Done"`` or ``"Pending"``."""
    return "Done" if status else "Pending"


def render_todos(todos: TodoList) -> str:
    """Render *todos* as one ``ID | title | status`` line per entry.

    Returns :data:`EMPTY_LIST_MESSAGE` when the list is empty.
    """
    if not todos:
        return EMPTY_LIST_MESSAGE
    return "\n".join(
        f"ID: {index} | title: {todo.title} | status: {transform_status(todo.status)}"
        for index, todo in enumerate(todos)
    )
