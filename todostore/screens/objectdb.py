"""Add/delete list screen working directly on a ZODB todo box."""

import logging
from pathlib import Path

from todostore.persistence.objectdb import ObjectStore, TodoBox
from todostore.screens.base import BACK, Screen
from todostore.screens.console import Console
from todostore.todo import Todo

logger = logging.getLogger(__name__)


class ObjectDBScreen(Screen):
    """Proof-of-concept screen for the object database.

    The store is opened when the screen is shown and closed when it is left.
    Box calls are synchronous.
    """

    title = "ObjectDB PoC"

    def __init__(self, console: Console, path: Path | None) -> None:
        super().__init__(console)
        self._store = ObjectStore(path)
        self._box: TodoBox | None = None
        self.items: list[Todo] = []

    @property
    def help_text(self) -> str:
        return "Commands: add TEXT | delete N | back | quit"

    @property
    def box(self) -> TodoBox:
        if self._box is None:
            self._box = self._store.box()
        return self._box

    async def open(self) -> None:
        self._store.open()
        self._box = self._store.box()
        self.refresh()

    async def close(self) -> None:
        self._store.close()
        self._box = None

    def refresh(self) -> None:
        self.items = list(reversed(self.box.get_all()))

    def add_item(self, name: str) -> int:
        todo_id = self.box.put(Todo(title=name))
        logger.info("Added item %d", todo_id)
        self.refresh()
        return todo_id

    def delete_item(self, todo_id: int) -> None:
        self.box.remove(todo_id)
        self.refresh()

    def render(self) -> str:
        lines = [f"== {self.title} =="]
        lines.extend(self._format_rows(self.items, show_done=False))
        return "\n".join(lines)

    async def handle(self, command: str, argument: str) -> str | None:
        if command in ("a", "add"):
            text = argument.strip()
            if text:
                self.add_item(text)

        elif command in ("d", "delete", "rm"):
            item = self._item_at(self.items, argument)
            if item:
                self.delete_item(item.id)

        elif command in ("b", "back"):
            return BACK

        elif command in ("h", "help", "?"):
            self._console.show(self.help_text)

        else:
            self._console.show(f"Unknown command '{command}'")
            self._console.show(self.help_text)

        return None
