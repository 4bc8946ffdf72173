"""Shared pytest fixtures and configuration for the todofile test suite.

Guidelines
----------
* Tests never touch the real ``storage/`` directory — every test runs
  with the working directory set to ``tmp_path``.
* Core tests must be pure — no side effects.
* Environment overrides are cleared so the host shell cannot leak in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todofile.config import LOG_LEVEL_ENV_VAR, PATH_ENV_VAR
from todofile.core.models import Todo, TodoList


@pytest.fixture(autouse=True)
def _isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    """Location of a not-yet-created todo file."""
    return tmp_path / "data" / "todos.json"


@pytest.fixture()
def sample_todos() -> TodoList:
    return TodoList(
        todos=(
            Todo(title="Buy milk"),
            Todo(title="Write report", status=True),
            Todo(title="Call mom"),
        )
    )
