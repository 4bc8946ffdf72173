"""CLI application entry point and command routing for todofile.

This module is the **sole error boundary** for the entire application.
It catches :class:`~todofile.exceptions.TodofileError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure store.
* The rendered list goes to stdout; errors and hints go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from todofile.cli import exit_codes
from todofile.cli.console import console, output
from todofile.config import Settings, load_settings
from todofile.core.models import TodoList
from todofile.core.operations import render_todos
from todofile.core.todo_service import TodoService
from todofile.exceptions import TodofileError
from todofile.version import __version__

MISSING_COMMAND_MESSAGE: str = (
    "Please provide a command. Use --help to see available commands"
)
UNKNOWN_COMMAND_MESSAGE: str = (
    "Unknown command. Please provide a valid command. "
    "See available commands using --help"
)

_COMMAND_HELP: dict[str, str] = {
    "add": "Add a todo:          add -title <string>",
    "list": "List all todos:      list",
    "done": "Mark a todo done:    done -id <int>",
    "delete": "Delete a todo:       delete -id <int>",
}


# ---------------------------------------------------------------------------
# Argument parsers
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only global options are parsed here.  Everything after the command
    name is handed to a per-command parser built by
    :func:`_build_command_parser`.
    """
    parser = argparse.ArgumentParser(
        prog="todofile",
        description="Manage a todo list stored in a JSON file.",
        epilog="commands:\n" + "\n".join(
            f"  {text}" for text in _COMMAND_HELP.values()
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        metavar="PATH",
        help="Todo file to use (default: $TODOFILE_PATH or storage/todos.json).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug).",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="One of: " + ", ".join(_COMMAND_HELP) + ".",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def _build_command_parser(command: str) -> argparse.ArgumentParser:
    """Construct the flag parser for a single command."""
    parser = argparse.ArgumentParser(
        prog=f"todofile {command}",
        description=_COMMAND_HELP[command],
    )
    if command == "add":
        parser.add_argument(
            "-title", "--title", default="", help="add a todo title",
        )
    elif command in ("done", "delete"):
        parser.add_argument(
            "-id", "--id", dest="todo_id", type=int, default=0, help="todo id",
        )
    return parser


_VALUE_FLAGS: dict[str, str] = {
    "-title": "--title",
    "--title": "--title",
    "-id": "--id",
    "--id": "--id",
}


def _join_flag_values(command_argv: list[str]) -> list[str]:
    """Bind each value flag to the argument that follows it.

    ``-title -urgent`` becomes ``--title=-urgent`` so that values
    starting with a dash are taken literally instead of being read as
    another flag.
    """
    joined: list[str] = []
    index = 0
    while index < len(command_argv):
        arg = command_argv[index]
        flag = _VALUE_FLAGS.get(arg)
        if flag is not None and index + 1 < len(command_argv):
            joined.append(f"{flag}={command_argv[index + 1]}")
            index += 2
            continue
        joined.append(arg)
        index += 1
    return joined


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_add(service: TodoService, args: argparse.Namespace) -> TodoList:
    return service.add(args.title)


def _handle_list(service: TodoService, args: argparse.Namespace) -> TodoList:
    return service.list_todos()


def _handle_done(service: TodoService, args: argparse.Namespace) -> TodoList:
    return service.mark_done(args.todo_id)


def _handle_delete(service: TodoService, args: argparse.Namespace) -> TodoList:
    return service.delete(args.todo_id)


_HANDLERS: dict[str, Callable[[TodoService, argparse.Namespace], TodoList]] = {
    "add": _handle_add,
    "list": _handle_list,
    "done": _handle_done,
    "delete": _handle_delete,
}


def _build_service(settings: Settings) -> TodoService:
    """Wire the JSON store into a :class:`TodoService`."""
    from todofile.infra.json_store import JsonTodoStore

    return TodoService(JsonTodoStore(settings.storage_path))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the todofile CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        console.print(MISSING_COMMAND_MESSAGE)
        return exit_codes.GENERAL_ERROR

    handler = _HANDLERS.get(args.command)
    if handler is None:
        console.print(UNKNOWN_COMMAND_MESSAGE)
        return exit_codes.SUCCESS

    command_parser = _build_command_parser(args.command)
    command_argv = _join_flag_values(args.args)
    if args.command == "list":
        # list takes no flags; trailing arguments are ignored.
        command_args, _ = command_parser.parse_known_args(command_argv)
    else:
        command_args = command_parser.parse_args(command_argv)

    from todofile.logging import configure_logging

    settings = load_settings(storage_path=args.file, verbosity=args.verbose)
    configure_logging(settings.log_level)

    todos = handler(_build_service(settings), command_args)
    output.print(render_todos(todos), markup=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TodofileError as exc:
        console.print_labelled("[bold red]Error:[/bold red]", str(exc))
        if exc.hint:
            console.print_labelled("[yellow]Hint:[/yellow]", exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_labelled(
            "[bold red]Unexpected error.[/bold red] Please report this issue.\n ",
            f"{type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
