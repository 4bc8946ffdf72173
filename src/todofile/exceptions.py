"""Custom exception hierarchy for todofile.

All exceptions that cross layer boundaries must inherit from
:class:`TodofileError`.  Raw ``OSError`` and ``json`` decoding errors
must never propagate beyond the infrastructure layer — they are caught
there and re-raised as a typed subclass defined here.

Hierarchy
---------
TodofileError
├── ValidationError
├── RangeError
├── NotFoundError
├── StorageError
│   └── CorruptStorageError
└── EnvironmentError
"""

from __future__ import annotations


class TodofileError(Exception):
    """Base exception for all todofile errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Operations ------------------------------------------------------------

class ValidationError(TodofileError):
    """Raised when a todo is created with an empty title."""


class RangeError(TodofileError):
    """Raised when a positional id falls outside the list."""


class NotFoundError(TodofileError):
    """Raised when a todo cannot be located at a valid position."""


# --- Storage ---------------------------------------------------------------

class StorageError(TodofileError):
    """Raised when the storage file cannot be created, read or written."""


class CorruptStorageError(StorageError):
    """Raised when the storage file exists but cannot be decoded."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(TodofileError):
    """Raised when an optional runtime dependency is not available."""
