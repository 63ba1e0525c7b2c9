"""Shared helpers for todostore tests."""

import io
import logging
from pathlib import Path
from typing import Iterable

from todostore.config import LoggingConfig, Settings, StorageConfig
from todostore.screens.console import Console
from todostore.todo import Todo


class ScriptedConsole(Console):
    """Console fed from a list of lines, recording everything shown."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output = io.StringIO()
        super().__init__(input_func=self._next_line, output=self.output)

    def _next_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def feed(self, *lines: str) -> None:
        self._lines.extend(lines)

    @property
    def text(self) -> str:
        return self.output.getvalue()


def make_settings(tmp_path: Path, backend: str = "sqlite") -> Settings:
    """Settings with every file under tmp_path."""
    return Settings(
        backend=backend,
        storage=StorageConfig(data_dir=tmp_path / "data"),
        logging=LoggingConfig(log_dir=tmp_path / "logs", level="DEBUG"),
    )


def sample_todos() -> list[Todo]:
    return [
        Todo(title="Buy milk"),
        Todo(title="Write report", is_done=True),
        Todo(title="Call plumber"),
    ]


def reset_root_logging() -> None:
    """Close handlers installed by setup_logging."""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
