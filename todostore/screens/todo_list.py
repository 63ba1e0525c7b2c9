"""Full CRUD list screen over an async todo store."""

import logging

from todostore.persistence.base import TodoStore
from todostore.screens.base import NAVIGATION_TABS, Screen
from todostore.screens.console import Console
from todostore.todo import Todo

logger = logging.getLogger(__name__)


class TodoListScreen(Screen):
    """Home screen: add, edit, check off and delete todos.

    Rows are numbered in display order (newest first); commands take the
    row number, not the stored id.
    """

    title = "SQLite Demo"
    tab_index = 0

    def __init__(self, console: Console, store: TodoStore) -> None:
        super().__init__(console)
        self._store = store
        self.todos: list[Todo] = []

    @property
    def help_text(self) -> str:
        return (
            "Commands: add | edit N | toggle N | done N | undo N | delete N | "
            "tab N | refresh | quit"
        )

    async def open(self) -> None:
        await self.refresh()

    async def refresh(self) -> None:
        self.todos = await self._store.get_all_todos()

    async def add_todo(self, title: str | None) -> int | None:
        """Store a new todo; empty or cancelled titles are ignored."""
        title = (title or "").strip()
        if not title:
            return None
        todo_id = await self._store.insert_todo(Todo(title=title))
        logger.info("Added todo %d", todo_id)
        await self.refresh()
        return todo_id

    async def edit_todo(self, todo: Todo, title: str | None) -> bool:
        title = (title or "").strip()
        if not title:
            return False
        changed = await self._store.update_todo(todo.copy_with(title=title))
        await self.refresh()
        return changed > 0

    async def set_done(self, todo: Todo, is_done: bool) -> None:
        await self._store.update_todo(todo.copy_with(is_done=is_done))
        await self.refresh()

    async def delete_todo(self, todo: Todo) -> None:
        await self._store.delete_todo(todo.id)
        logger.info("Deleted todo %d", todo.id)
        await self.refresh()

    def _dialog(self, heading: str, current: str | None = None) -> str | None:
        """Ask for a title; the current title is shown when editing."""
        self._console.show(heading)
        prompt = f"Enter todo title [{current}]: " if current else "Enter todo title: "
        return self._console.ask(prompt)

    def render(self) -> str:
        lines = [f"== {self.title} =="]
        lines.extend(self._format_rows(self.todos))
        tabs = []
        for index, (_, label) in enumerate(NAVIGATION_TABS):
            marker = "*" if index == self.tab_index else " "
            tabs.append(f"[{marker}{index + 1} {label}]")
        lines.append("  ".join(tabs))
        return "\n".join(lines)

    async def handle(self, command: str, argument: str) -> str | None:
        if command in ("a", "add"):
            await self.add_todo(self._dialog("New Todo"))

        elif command in ("e", "edit"):
            todo = self._item_at(self.todos, argument)
            if todo:
                await self.edit_todo(todo, self._dialog("Edit Todo", todo.title))

        elif command in ("t", "toggle"):
            todo = self._item_at(self.todos, argument)
            if todo:
                await self.set_done(todo, not todo.is_done)

        elif command in ("done", "undo"):
            todo = self._item_at(self.todos, argument)
            if todo:
                await self.set_done(todo, command == "done")

        elif command in ("d", "delete", "rm"):
            todo = self._item_at(self.todos, argument)
            if todo:
                await self.delete_todo(todo)

        elif command == "tab":
            tab = self._item_at(NAVIGATION_TABS, argument)
            if tab:
                return self._navigate(tab[0])

        elif command in dict(NAVIGATION_TABS):
            return self._navigate(command)

        elif command in ("r", "refresh"):
            await self.refresh()

        elif command in ("h", "help", "?"):
            self._console.show(self.help_text)

        else:
            self._console.show(f"Unknown command '{command}'")
            self._console.show(self.help_text)

        return None

    def _navigate(self, route: str) -> str | None:
        if route == NAVIGATION_TABS[self.tab_index][0]:
            return None
        return route
