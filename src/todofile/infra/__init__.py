"""Infrastructure layer — filesystem integration.

Every raw ``OSError`` or decoding error must be caught here and
re-raised as a :class:`~todofile.exceptions.TodofileError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from todofile.infra.json_store import JsonTodoStore

__all__: list[str] = ["JsonTodoStore"]
