"""Abstract todo store interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todostore.todo import Todo


class TodoStore(ABC):
    """Async CRUD interface implemented by every storage backend."""

    name: str = "base"

    async def __aenter__(self) -> "TodoStore":
        await self.open()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    @abstractmethod
    async def open(self) -> None:
        """Open the underlying database and make sure the schema exists."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the underlying database. Closing twice is a no-op."""
        pass

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Check if the store is open."""
        pass

    @abstractmethod
    async def insert_todo(self, todo: "Todo") -> int:
        """
        Store a new todo.

        Returns:
            The id assigned to the stored todo.
        """
        pass

    @abstractmethod
    async def get_all_todos(self) -> list["Todo"]:
        """Get all todos, newest first."""
        pass

    @abstractmethod
    async def get_todo(self, todo_id: int) -> "Todo | None":
        """Get a todo by id."""
        pass

    @abstractmethod
    async def update_todo(self, todo: "Todo") -> int:
        """
        Overwrite the stored todo with the same id.

        Returns:
            Number of todos changed (0 or 1).
        """
        pass

    @abstractmethod
    async def delete_todo(self, todo_id: int) -> int:
        """
        Delete a todo by id.

        Returns:
            Number of todos removed (0 or 1).
        """
        pass

    @abstractmethod
    async def count_todos(self) -> int:
        """Count stored todos."""
        pass

    @abstractmethod
    async def clear(self) -> int:
        """
        Delete every todo.

        Returns:
            Number of todos removed.
        """
        pass
