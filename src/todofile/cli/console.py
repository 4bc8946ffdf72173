"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) remain functional even when
it is not installed.

Two proxies are exported: ``output`` writes command results to stdout,
``console`` writes errors and hints to stderr.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from todofile.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance that never hard-wraps lines."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print.

		Pass ``markup=False`` for user-supplied text such as todo titles
		so it is printed verbatim.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			if markup:
				objects = tuple(_MARKUP_TAG.sub("", str(obj)) for obj in objects)
			print(*objects, file=stream)
			return
		rich_console.print(
			*objects, markup=markup, highlight=False, emoji=markup,
		)

	def print_labelled(self, label: str, message: str) -> None:
		"""Print a markup *label* followed by *message* taken verbatim."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(_MARKUP_TAG.sub("", label), message, file=stream)
			return
		from rich.markup import escape

		rich_console.print(label, escape(message), highlight=False, emoji=False)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
