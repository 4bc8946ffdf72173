"""Runtime settings for todofile.

The storage file defaults to ``storage/todos.json`` under the working
directory.  It can be overridden with the ``TODOFILE_PATH`` environment
variable, and an explicit ``--file`` flag beats both.

Log level resolution order:
1. ``-v`` (INFO) or ``-vv`` (DEBUG) on the command line
2. ``TODOFILE_LOG_LEVEL`` environment variable
3. WARNING
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STORAGE_PATH: Path = Path("storage") / "todos.json"

PATH_ENV_VAR: str = "TODOFILE_PATH"
LOG_LEVEL_ENV_VAR: str = "TODOFILE_LOG_LEVEL"

DEFAULT_LOG_LEVEL: str = "WARNING"
_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved settings for a single invocation."""

    storage_path: Path
    """Storage file location; relative paths resolve against the cwd."""

    log_level: str
    """One of ``DEBUG``, ``INFO``, ``WARNING`` or ``ERROR``."""


def load_settings(
    storage_path: str | Path | None = None,
    verbosity: int = 0,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve :class:`Settings` from explicit values and the environment.

    Parameters
    ----------
    storage_path:
        Value of ``--file``, or ``None`` when not given.
    verbosity:
        Number of ``-v`` flags.
    environ:
        Environment mapping; defaults to :data:`os.environ`.
    """
    env = os.environ if environ is None else environ
    return Settings(
        storage_path=_resolve_storage_path(storage_path, env),
        log_level=_resolve_log_level(verbosity, env),
    )


def _resolve_storage_path(
    explicit: str | Path | None,
    env: Mapping[str, str],
) -> Path:
    if explicit is not None and str(explicit) != "":
        return Path(explicit).expanduser()
    if from_env := env.get(PATH_ENV_VAR):
        return Path(from_env).expanduser()
    return DEFAULT_STORAGE_PATH


def _resolve_log_level(verbosity: int, env: Mapping[str, str]) -> str:
    if verbosity >= 2:
        return "DEBUG"
    if verbosity == 1:
        return "INFO"
    level = env.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    if level not in _LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level
