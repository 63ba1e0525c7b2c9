"""Embedded object database store backed by ZODB."""

import logging
from pathlib import Path
from typing import Iterable

import transaction
import ZODB
import ZODB.FileStorage
from BTrees.LOBTree import LOBTree
from BTrees.Length import Length
from persistent import Persistent

from todostore.errors import DuplicateTodoError, StoreNotOpenError, TodoNotFoundError
from todostore.persistence.base import TodoStore
from todostore.todo import Todo

logger = logging.getLogger(__name__)

TODOS_KEY = "todos"
SEQUENCE_KEY = "todo_id_sequence"


class TodoRecord(Persistent):
    """Stored form of a todo; the id is the key it is stored under."""

    def __init__(self, title: str, is_done: bool = False) -> None:
        self.title = title
        self.is_done = is_done

    def to_todo(self, todo_id: int) -> Todo:
        return Todo(id=todo_id, title=self.title, is_done=self.is_done)


class TodoBox:
    """Synchronous put/get/remove access to the todos of an ObjectStore."""

    def __init__(self, store: "ObjectStore") -> None:
        self._store = store

    @property
    def _todos(self) -> LOBTree:
        return self._store.root[TODOS_KEY]

    def _next_id(self) -> int:
        sequence: Length = self._store.root[SEQUENCE_KEY]
        sequence.change(1)
        return sequence()

    def _put(self, todo: Todo) -> int:
        todos = self._todos
        if todo.id == 0:
            todo_id = self._next_id()
            todos[todo_id] = TodoRecord(todo.title, todo.is_done)
            return todo_id

        record = todos.get(todo.id)
        if record is None:
            raise TodoNotFoundError(todo.id)
        record.title = todo.title
        record.is_done = todo.is_done
        return todo.id

    def put(self, todo: Todo) -> int:
        """
        Insert (id 0) or update a todo.

        Returns:
            The id the todo is stored under.

        Raises:
            TodoNotFoundError: If a non-zero id is not stored.
        """
        with self._store.transaction_manager:
            return self._put(todo)

    def put_many(self, todos: Iterable[Todo]) -> list[int]:
        """Put several todos in a single transaction."""
        with self._store.transaction_manager:
            return [self._put(todo) for todo in todos]

    def insert(self, todo: Todo) -> int:
        """
        Insert a todo, keeping an explicit non-zero id.

        Raises:
            DuplicateTodoError: If the explicit id is already stored.
        """
        if todo.id == 0:
            return self.put(todo)
        with self._store.transaction_manager:
            todos = self._todos
            if todo.id in todos:
                raise DuplicateTodoError(todo.id)
            todos[todo.id] = TodoRecord(todo.title, todo.is_done)
            # Explicit ids bypass the sequence; keep it ahead of them
            sequence: Length = self._store.root[SEQUENCE_KEY]
            if sequence() < todo.id:
                sequence.set(todo.id)
            return todo.id

    def get(self, todo_id: int) -> Todo | None:
        record = self._todos.get(todo_id)
        return record.to_todo(todo_id) if record is not None else None

    def get_all(self) -> list[Todo]:
        """All todos in insertion (ascending id) order."""
        return [record.to_todo(todo_id) for todo_id, record in self._todos.items()]

    def contains(self, todo_id: int) -> bool:
        return todo_id in self._todos

    def remove(self, todo_id: int) -> bool:
        with self._store.transaction_manager:
            todos = self._todos
            if todo_id not in todos:
                return False
            del todos[todo_id]
            return True

    def remove_all(self) -> int:
        with self._store.transaction_manager:
            todos = self._todos
            count = len(todos)
            todos.clear()
            return count

    def count(self) -> int:
        return len(self._todos)


class ObjectStore:
    """ZODB database holding the todo box.

    With no path the store lives in memory and is gone once closed.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._db: ZODB.DB | None = None
        self._connection = None
        # Own manager so the store does not depend on thread-local transactions
        self._transaction_manager = transaction.TransactionManager()

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def transaction_manager(self) -> transaction.TransactionManager:
        return self._transaction_manager

    @property
    def root(self):
        """Root mapping of the open connection."""
        if self._connection is None:
            raise StoreNotOpenError("Object store not open")
        return self._connection.root()

    def open(self) -> None:
        """Open the storage and create the todo containers if missing."""
        if self._connection is not None:
            return
        if self._path is not None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            storage = ZODB.FileStorage.FileStorage(str(self._path))
        else:
            storage = None
        self._db = ZODB.DB(storage)
        self._connection = self._db.open(transaction_manager=self._transaction_manager)

        with self._transaction_manager:
            root = self._connection.root()
            if TODOS_KEY not in root:
                root[TODOS_KEY] = LOBTree()
            if SEQUENCE_KEY not in root:
                root[SEQUENCE_KEY] = Length()
        logger.info("Object store opened: %s", self._path or "memory")

    def close(self) -> None:
        if self._connection is None:
            return
        self._transaction_manager.abort()
        self._connection.close()
        self._db.close()
        self._connection = None
        self._db = None
        logger.info("Object store closed")

    def box(self) -> TodoBox:
        if self._connection is None:
            raise StoreNotOpenError("Object store not open")
        return TodoBox(self)


class ObjectDBTodoRepository(TodoStore):
    """TodoStore adapter over the synchronous TodoBox."""

    name = "zodb"

    def __init__(self, path: Path | None = None) -> None:
        self._store = ObjectStore(path)

    @property
    def object_store(self) -> ObjectStore:
        return self._store

    @property
    def is_open(self) -> bool:
        return self._store.is_open

    async def open(self) -> None:
        self._store.open()

    async def close(self) -> None:
        self._store.close()

    async def insert_todo(self, todo: Todo) -> int:
        todo_id = self._store.box().insert(todo)
        logger.debug("Inserted todo %d", todo_id, extra={"backend": self.name})
        return todo_id

    async def get_all_todos(self) -> list[Todo]:
        return list(reversed(self._store.box().get_all()))

    async def get_todo(self, todo_id: int) -> Todo | None:
        return self._store.box().get(todo_id)

    async def update_todo(self, todo: Todo) -> int:
        box = self._store.box()
        if todo.id == 0 or not box.contains(todo.id):
            return 0
        box.put(todo)
        return 1

    async def delete_todo(self, todo_id: int) -> int:
        return 1 if self._store.box().remove(todo_id) else 0

    async def count_todos(self) -> int:
        return self._store.box().count()

    async def clear(self) -> int:
        return self._store.box().remove_all()
