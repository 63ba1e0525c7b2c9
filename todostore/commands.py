"""One-shot command line operations against a single backend."""

import logging
import tempfile
from pathlib import Path

from todostore.compare import format_comparison, run_comparison
from todostore.config import Settings
from todostore.errors import TodoNotFoundError
from todostore.persistence.base import TodoStore
from todostore.persistence.registry import create_store
from todostore.screens.console import Console
from todostore.todo import Todo

logger = logging.getLogger(__name__)


def configured_store(settings: Settings) -> TodoStore:
    """Create the (unopened) store selected by ``settings.backend``."""
    return create_store(settings.backend, settings.storage.path_for(settings.backend))


def format_todo(todo: Todo) -> str:
    return f"{todo.id:>5}  [{'x' if todo.is_done else ' '}] {todo.title}"


async def _require(store: TodoStore, todo_id: int) -> Todo:
    todo = await store.get_todo(todo_id)
    if todo is None:
        raise TodoNotFoundError(todo_id)
    return todo


async def list_todos(store: TodoStore, console: Console) -> int:
    todos = await store.get_all_todos()
    if not todos:
        console.show("No todos")
    for todo in todos:
        console.show(format_todo(todo))
    return 0


async def add_todo(store: TodoStore, console: Console, title: str) -> int:
    todo_id = await store.insert_todo(Todo(title=title.strip()))
    console.show(f"Added todo {todo_id}")
    return 0


async def edit_todo(store: TodoStore, console: Console, todo_id: int, title: str) -> int:
    todo = await _require(store, todo_id)
    await store.update_todo(todo.copy_with(title=title.strip()))
    console.show(f"Updated todo {todo_id}")
    return 0


async def set_done(store: TodoStore, console: Console, todo_id: int, is_done: bool) -> int:
    todo = await _require(store, todo_id)
    await store.update_todo(todo.copy_with(is_done=is_done))
    console.show(format_todo(todo.copy_with(is_done=is_done)))
    return 0


async def delete_todo(store: TodoStore, console: Console, todo_id: int) -> int:
    if not await store.delete_todo(todo_id):
        raise TodoNotFoundError(todo_id)
    console.show(f"Deleted todo {todo_id}")
    return 0


async def clear_todos(store: TodoStore, console: Console) -> int:
    removed = await store.clear()
    console.show(f"Deleted {removed} todos")
    return 0


async def compare(console: Console, count: int, workdir: Path | None = None) -> int:
    """Time both backends on scratch files; a temporary directory by default."""
    if workdir is not None:
        results = await run_comparison(workdir, count)
    else:
        with tempfile.TemporaryDirectory(prefix="todostore-compare-") as tmp:
            results = await run_comparison(Path(tmp), count)
    console.show(format_comparison(results))
    return 0
