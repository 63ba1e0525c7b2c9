"""SQLite todo store."""

import logging
import sqlite3
from pathlib import Path

from todostore.errors import DuplicateTodoError
from todostore.persistence.base import TodoStore
from todostore.persistence.database import Database
from todostore.todo import Todo

logger = logging.getLogger(__name__)


class SqliteTodoRepository(TodoStore):
    """Todo store backed by a single SQLite table."""

    name = "sqlite"

    def __init__(self, path: Path | str) -> None:
        self._db = Database(path)

    @property
    def database(self) -> Database:
        return self._db

    @property
    def is_open(self) -> bool:
        return self._db.is_connected

    async def open(self) -> None:
        await self._db.connect()

    async def close(self) -> None:
        await self._db.disconnect()

    async def insert_todo(self, todo: Todo) -> int:
        """Insert a todo; an id of 0 lets SQLite assign one."""
        row = todo.to_map()
        if todo.id == 0:
            cursor = await self._db.execute(
                "INSERT INTO todos (title, is_done) VALUES (:title, :is_done)",
                row,
            )
        else:
            try:
                cursor = await self._db.execute(
                    "INSERT INTO todos (id, title, is_done) VALUES (:id, :title, :is_done)",
                    row,
                )
            except sqlite3.IntegrityError as e:
                raise DuplicateTodoError(todo.id) from e
        await self._db.commit()
        logger.debug("Inserted todo %d", cursor.lastrowid, extra={"backend": self.name})
        return cursor.lastrowid

    async def get_all_todos(self) -> list[Todo]:
        rows = await self._db.fetchall("SELECT * FROM todos ORDER BY id DESC")
        return [Todo.from_map(row) for row in rows]

    async def get_todo(self, todo_id: int) -> Todo | None:
        row = await self._db.fetchone(
            "SELECT * FROM todos WHERE id = ?",
            (todo_id,),
        )
        return Todo.from_map(row) if row else None

    async def update_todo(self, todo: Todo) -> int:
        if todo.id == 0:
            return 0
        cursor = await self._db.execute(
            "UPDATE todos SET title = :title, is_done = :is_done WHERE id = :id",
            todo.to_map(),
        )
        await self._db.commit()
        return cursor.rowcount

    async def delete_todo(self, todo_id: int) -> int:
        cursor = await self._db.execute(
            "DELETE FROM todos WHERE id = ?",
            (todo_id,),
        )
        await self._db.commit()
        return cursor.rowcount

    async def count_todos(self) -> int:
        row = await self._db.fetchone("SELECT COUNT(*) AS count FROM todos")
        return row["count"] if row else 0

    async def clear(self) -> int:
        count = await self.count_todos()
        await self._db.execute("DELETE FROM todos")
        await self._db.commit()
        return count
