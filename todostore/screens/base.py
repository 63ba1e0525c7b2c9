"""Base class for list screens."""

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

from todostore.screens.console import Console
from todostore.todo import Todo

T = TypeVar("T")

# Navigation results returned by Screen.handle
BACK = "back"
QUIT = "quit"


class Screen(ABC):
    """A list view over one store, driven by line commands."""

    title: str = ""

    def __init__(self, console: Console) -> None:
        self._console = console

    async def open(self) -> None:
        """Called when the screen is pushed."""
        pass

    async def close(self) -> None:
        """Called when the screen is popped or the application exits."""
        pass

    @abstractmethod
    def render(self) -> str:
        """Render the screen as text."""
        pass

    @abstractmethod
    async def handle(self, command: str, argument: str) -> str | None:
        """
        Handle one command.

        Returns:
            A route name to push, BACK, QUIT, or None to stay.
        """
        pass

    @property
    @abstractmethod
    def help_text(self) -> str:
        pass

    def _item_at(self, items: Sequence[T], argument: str) -> T | None:
        """Resolve a 1-based row number, reporting bad input on the console."""
        try:
            position = int(argument)
        except ValueError:
            self._console.show(f"Expected a row number, got '{argument}'")
            return None
        if not 1 <= position <= len(items):
            self._console.show(f"No item at row {position}")
            return None
        return items[position - 1]

    @staticmethod
    def _format_rows(todos: Sequence[Todo], show_done: bool = True) -> list[str]:
        if not todos:
            return ["  (empty)"]
        rows = []
        for position, todo in enumerate(todos, start=1):
            mark = f"[{'x' if todo.is_done else ' '}] " if show_done else ""
            rows.append(f"  {position}. {mark}{todo.title}")
        return rows


# Routes, in bottom navigation bar order
HOME_ROUTE = "sqlite"
OBJECTDB_ROUTE = "zodb"
NAVIGATION_TABS = [(HOME_ROUTE, "SQLite"), (OBJECTDB_ROUTE, "ZODB")]
