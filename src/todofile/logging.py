"""Centralized logging configuration for todofile.

The CLI calls :func:`configure_logging` once at startup.  Library
modules only ever do ``logger = logging.getLogger(__name__)``.

Logging Levels:
- DEBUG: load/save record counts
- INFO: storage bootstrap, applied commands
- WARNING: default; nothing is emitted during a normal run
"""

from __future__ import annotations

import logging

LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING", use_rich: bool = True) -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        use_rich: Prefer a Rich handler; falls back to a plain stream
            handler when Rich is not installed.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler: logging.Handler | None = None
    if use_rich:
        handler = _rich_handler()
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    logging.basicConfig(level=log_level, handlers=[handler], force=True)


def _rich_handler() -> logging.Handler | None:
    """Return a stderr ``RichHandler`` or ``None`` without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        return None

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=False,
        show_path=False,
        show_time=True,
        markup=False,
    )
    # RichHandler renders time and level itself.
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler
