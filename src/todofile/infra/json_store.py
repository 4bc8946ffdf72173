"""JSON-file implementation of :class:`~todofile.core.protocols.TodoRepository`.

The file holds a JSON array of ``{"Title": str, "Status": bool}``
objects and is overwritten wholesale on every save.  All ``OSError`` and
decoding failures are caught here and re-raised as typed
:class:`~todofile.exceptions.StorageError` subclasses.

Rules
-----
* No ``print()`` — callers handle user-facing output.
* No locking and no atomic rename: the last writer wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from todofile.config import DEFAULT_STORAGE_PATH
from todofile.core.models import Todo, TodoList
from todofile.exceptions import CorruptStorageError, StorageError

logger = logging.getLogger(__name__)

_EMPTY_DOCUMENT: str = "[]"


class JsonTodoStore:
    """Concrete :class:`TodoRepository` backed by a single JSON file.

    Usage::

        store = JsonTodoStore(Path("storage/todos.json"))
        todos = store.load()
        store.save(todos)

    A relative *path* is resolved against the working directory each
    time the file is touched.
    """

    def __init__(self, path: Path | str = DEFAULT_STORAGE_PATH) -> None:
        self._path: Path = Path(path)

    @property
    def path(self) -> Path:
        """Absolute location of the storage file."""
        if self._path.is_absolute():
            return self._path
        return Path.cwd() / self._path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self) -> TodoList:
        """Read and decode the storage file, creating it when absent.

        Raises
        ------
        StorageError
            When the file cannot be created or read.
        CorruptStorageError
            When the contents are not a JSON array of todo objects.
        """
        path = self._ensure_file()
        try:
            raw_text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise self._corrupt(path, "file is not valid UTF-8") from exc
        except OSError as exc:
            raise StorageError(
                f"Could not read {path}: {exc.strerror or exc}",
            ) from exc

        try:
            document: Any = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise self._corrupt(path, f"invalid JSON ({exc.msg})") from exc

        todos = self._decode(path, document)
        logger.debug("Loaded %d todo(s) from %s", len(todos), path)
        return todos

    def save(self, todos: TodoList) -> None:
        """Serialize *todos* and overwrite the storage file.

        Raises
        ------
        StorageError
            When the file cannot be written.
        """
        path = self._ensure_file()
        payload = [{"Title": todo.title, "Status": todo.status} for todo in todos]
        try:
            path.write_text(json.dumps(payload), encoding="utf-8")
        except OSError as exc:
            raise StorageError(
                f"Could not write {path}: {exc.strerror or exc}",
            ) from exc
        logger.debug("Saved %d todo(s) to %s", len(todos), path)

    # ------------------------------------------------------------------
    # File bootstrap
    # ------------------------------------------------------------------

    def _ensure_file(self) -> Path:
        """Return the storage path, writing an empty array if it is missing."""
        path = self.path
        if path.exists():
            return path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_EMPTY_DOCUMENT, encoding="utf-8")
        except OSError as exc:
            raise StorageError(
                f"Could not create {path}: {exc.strerror or exc}",
                hint="Check that the directory is writable or pass --file.",
            ) from exc
        logger.info("Created empty todo file at %s", path)
        return path

    # ------------------------------------------------------------------
    # Raw JSON → domain-model parsers
    # ------------------------------------------------------------------

    @classmethod
    def _decode(cls, path: Path, document: Any) -> TodoList:
        if not isinstance(document, list):
            raise cls._corrupt(path, "top-level value is not an array")
        return TodoList(
            todos=tuple(
                cls._decode_entry(path, index, entry)
                for index, entry in enumerate(document)
            )
        )

    @classmethod
    def _decode_entry(cls, path: Path, index: int, entry: Any) -> Todo:
        """Convert one raw object to a :class:`Todo`.

        Keys match case-insensitively, so ``title`` and ``Title`` are
        both accepted.  A missing status reads as pending.
        """
        if not isinstance(entry, dict):
            raise cls._corrupt(path, f"entry {index} is not an object")
        fields = {str(key).lower(): value for key, value in entry.items()}

        title = fields.get("title")
        if not isinstance(title, str):
            raise cls._corrupt(path, f"entry {index} has no string Title")

        status = fields.get("status", False)
        if not isinstance(status, bool):
            raise cls._corrupt(path, f"entry {index} has a non-boolean Status")

        return Todo(title=title, status=status)

    @staticmethod
    def _corrupt(path: Path, reason: str) -> CorruptStorageError:
        return CorruptStorageError(
            f"Todo file {path} is corrupt: {reason}",
            hint=f"Fix or remove {path}; it will be recreated empty.",
        )
