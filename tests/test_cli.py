"""Tests for the command line entry point."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from main import apply_args_to_settings, main, parse_args
from todostore.config import Settings

from tests.fixtures import reset_root_logging


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Point every file the CLI touches into tmp_path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TODOSTORE_STORAGE__DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TODOSTORE_LOGGING__LOG_DIR", str(tmp_path / "logs"))
    yield tmp_path
    reset_root_logging()


def test_parse_args_defaults():
    args = parse_args([])

    assert args.command is None
    assert args.backend is None
    assert args.list_backends is False


def test_apply_args_to_settings():
    args = parse_args(["--backend", "zodb", "--data-dir", "/tmp/todos", "--log-level", "DEBUG",
                       "compare", "--count", "7"])

    settings = apply_args_to_settings(args, Settings())

    assert settings.backend == "zodb"
    assert settings.storage.data_dir == Path("/tmp/todos")
    assert settings.logging.level == "DEBUG"
    assert settings.compare.count == 7


def test_list_backends(capsys):
    assert main(["--list-backends"]) == 0

    out = capsys.readouterr().out
    assert "- sqlite" in out
    assert "- zodb" in out


@pytest.mark.parametrize("backend", ["sqlite", "zodb"])
def test_one_shot_commands(cli_env, capsys, backend):
    base = ["--backend", backend]

    assert main(base + ["add", "Buy milk"]) == 0
    assert main(base + ["add", "Walk dog"]) == 0
    assert main(base + ["done", "1"]) == 0
    assert main(base + ["edit", "2", "Walk the dog"]) == 0
    capsys.readouterr()

    assert main(base + ["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "    2  [ ] Walk the dog",
        "    1  [x] Buy milk",
    ]

    assert main(base + ["undo", "1"]) == 0
    assert main(base + ["delete", "2"]) == 0
    assert main(base + ["clear"]) == 0
    assert "Deleted 1 todos" in capsys.readouterr().out


def test_backends_use_separate_files(cli_env, capsys):
    assert main(["--backend", "sqlite", "add", "only in sqlite"]) == 0
    capsys.readouterr()

    assert main(["--backend", "zodb", "list"]) == 0
    assert capsys.readouterr().out.strip() == "No todos"
    assert (cli_env / "data" / "todos_secure.db").exists()
    assert (cli_env / "data" / "todos.fs").exists()


@pytest.mark.parametrize("command", [["done", "9"], ["edit", "9", "x"], ["delete", "9"]])
def test_missing_id_exits_with_error(cli_env, capsys, command):
    assert main(command) == 1
    assert "Todo 9 not found" in capsys.readouterr().err


def test_empty_title_is_fatal(cli_env, capsys):
    assert main(["add", "   "]) == 1
    assert "title must not be empty" in capsys.readouterr().err


def test_compare_command(cli_env, capsys):
    assert main(["compare", "--count", "3", "--workdir", str(cli_env / "bench")]) == 0

    out = capsys.readouterr().out
    assert "sqlite" in out
    assert "zodb" in out
    assert "(3 todos per backend, times in ms)" in out


def test_ui_runs_until_end_of_input(cli_env, capsys, monkeypatch):
    lines = iter(["add", "From the UI"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    assert main(["ui"]) == 0
    assert "1. [ ] From the UI" in capsys.readouterr().out


@pytest.mark.parametrize("count", ["0", "-5"])
def test_compare_count_is_validated(count):
    args = parse_args(["compare", "--count", count])

    with pytest.raises(ValidationError):
        apply_args_to_settings(args, Settings())


@pytest.mark.parametrize("count", ["0", "-5"])
def test_compare_bad_count_exits_with_error(cli_env, capsys, count):
    assert main(["compare", "--count", count, "--workdir", str(cli_env / "bench")]) == 1

    assert "Fatal error" in capsys.readouterr().err
    assert not (cli_env / "bench").exists()
