"""End-to-end tests for the CLI (cli/app.py) against a real temp file.

Coverage:
* Each command prints the resulting list and persists mutations.
* Missing and unknown commands produce the expected exit codes.
* Failed commands never rewrite the storage file.
* The ``cli()`` error boundary maps exceptions to exit codes.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from todofile.cli import app as app_module
from todofile.cli import exit_codes
from todofile.cli.app import cli, main
from todofile.exceptions import RangeError, ValidationError


def _run(store_path: Path, *args: str) -> int:
    return main(["--file", str(store_path), *args])


def _stored(store_path: Path) -> list[dict[str, object]]:
    return json.loads(store_path.read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class TestCommands:
    def test_add_prints_and_persists(
        self, store_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run(store_path, "add", "-title", "Buy milk") == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "ID: 0 | title: Buy milk | status: Pending" in out
        assert _stored(store_path) == [{"Title": "Buy milk", "Status": False}]

    def test_add_accepts_long_flag(self, store_path: Path) -> None:
        _run(store_path, "add", "--title", "Buy milk")
        assert _stored(store_path)[0]["Title"] == "Buy milk"

    def test_list_on_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["list"]) == exit_codes.SUCCESS
        assert "No todo available" in capsys.readouterr().out
        assert (tmp_path / "storage" / "todos.json").read_text() == "[]"

    def test_done_marks_and_persists(
        self, store_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _run(store_path, "add", "-title", "Buy milk")
        _run(store_path, "add", "-title", "Call mom")
        capsys.readouterr()

        assert _run(store_path, "done", "-id", "1") == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "ID: 0 | title: Buy milk | status: Pending" in out
        assert "ID: 1 | title: Call mom | status: Done" in out
        assert _stored(store_path)[1]["Status"] is True

    def test_done_defaults_to_first_todo(self, store_path: Path) -> None:
        _run(store_path, "add", "-title", "Buy milk")
        _run(store_path, "done")
        assert _stored(store_path)[0]["Status"] is True

    def test_delete_shifts_ids(
        self, store_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        for title in ("a", "b", "c"):
            _run(store_path, "add", "-title", title)
        capsys.readouterr()

        assert _run(store_path, "delete", "--id", "0") == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "ID: 0 | title: b | status: Pending" in out
        assert "ID: 1 | title: c | status: Pending" in out
        assert [item["Title"] for item in _stored(store_path)] == ["b", "c"]

    def test_delete_last_prints_empty_message(
        self, store_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _run(store_path, "add", "-title", "only")
        capsys.readouterr()
        _run(store_path, "delete", "-id", "0")
        assert "No todo available" in capsys.readouterr().out
        assert _stored(store_path) == []

    def test_title_markup_is_printed_verbatim(
        self, store_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _run(store_path, "add", "-title", "[bold]not bold[/bold]")
        assert "title: [bold]not bold[/bold]" in capsys.readouterr().out

    @pytest.mark.parametrize("flag", ["-title", "--title"])
    def test_title_starting_with_dash(
        self, store_path: Path, capsys: pytest.CaptureFixture[str], flag: str,
    ) -> None:
        assert _run(store_path, "add", flag, "-urgent") == exit_codes.SUCCESS
        assert "ID: 0 | title: -urgent | status: Pending" in capsys.readouterr().out
        assert _stored(store_path) == [{"Title": "-urgent", "Status": False}]

    def test_title_that_looks_like_a_flag(self, store_path: Path) -> None:
        _run(store_path, "add", "-title", "--help")
        assert _stored(store_path)[0]["Title"] == "--help"

    def test_env_var_selects_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        target = tmp_path / "env.json"
        monkeypatch.setenv("TODOFILE_PATH", str(target))
        main(["add", "-title", "from env"])
        assert _stored(target) == [{"Title": "from env", "Status": False}]


# ---------------------------------------------------------------------------
# Routing edge cases
# ---------------------------------------------------------------------------

class TestRouting:
    def test_no_command_fails(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main([]) == exit_codes.GENERAL_ERROR
        assert "Please provide a command" in capsys.readouterr().err

    def test_unknown_command_succeeds_without_touching_storage(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["frobnicate"]) == exit_codes.SUCCESS
        assert "Unknown command" in capsys.readouterr().err
        assert not (tmp_path / "storage").exists()

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "delete -id <int>" in capsys.readouterr().out

    def test_bad_id_value_is_a_usage_error(self, store_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run(store_path, "done", "-id", "abc")
        assert exc_info.value.code == 2

    def test_verbose_logs_to_stderr(
        self,
        store_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("COLUMNS", "500")
        _run(store_path, "-vv", "list")
        err = capsys.readouterr().err
        assert "Created empty todo file" in err
        assert "Loaded 0 todo(s)" in err

    def test_log_lines_show_level_once(
        self,
        store_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("COLUMNS", "500")
        _run(store_path, "-v", "list")
        err = capsys.readouterr().err
        assert "INFO" in err
        assert "INFO:todofile" not in err
        assert "todofile.infra.json_store" not in err

    def test_list_ignores_trailing_arguments(
        self, store_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run(store_path, "list", "extra", "-x") == exit_codes.SUCCESS
        assert "No todo available" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Failures leave storage alone
# ---------------------------------------------------------------------------

class TestFailedCommands:
    def test_empty_title_raises(self, store_path: Path) -> None:
        with pytest.raises(ValidationError):
            _run(store_path, "add")
        assert _stored(store_path) == []

    @pytest.mark.parametrize("command", ["done", "delete"])
    @pytest.mark.parametrize("todo_id", ["-1", "1"])
    def test_out_of_range_does_not_rewrite(
        self, store_path: Path, command: str, todo_id: str,
    ) -> None:
        _run(store_path, "add", "-title", "Buy milk")
        before = store_path.read_text()
        with pytest.raises(RangeError):
            _run(store_path, command, "-id", todo_id)
        assert store_path.read_text() == before


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_known_error_exits_one_with_hint(
        self,
        store_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["todofile", "--file", str(store_path), "add"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Title required" in err
        assert "Hint:" in err

    def test_corrupt_file_exits_one(
        self,
        store_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        store_path.parent.mkdir(parents=True)
        store_path.write_text("not json")
        monkeypatch.setattr(sys, "argv", ["todofile", "--file", str(store_path), "list"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "corrupt" in capsys.readouterr().err

    def test_error_text_is_not_read_as_markup(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("COLUMNS", "500")
        target = tmp_path / "[red]lists" / "todos.json"
        target.parent.mkdir()
        target.write_text("[broken")
        monkeypatch.setattr(sys, "argv", ["todofile", "--file", str(target), "list"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "[red]lists" in err
        assert "Fix or remove" in err

    def test_success_exits_zero(
        self, store_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["todofile", "--file", str(store_path), "list"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _interrupt() -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _boom() -> int:
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "main", _boom)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: boom" in capsys.readouterr().err
