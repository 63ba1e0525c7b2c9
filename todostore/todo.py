"""The todo record and its map serialization."""

from dataclasses import dataclass, replace
from typing import Any, Mapping

from todostore.errors import InvalidTodoError


@dataclass
class Todo:
    """A single to-do item.

    An ``id`` of 0 marks a todo that has not been stored yet; the backend
    assigns the real id on insert.
    """

    title: str
    id: int = 0
    is_done: bool = False

    def __post_init__(self) -> None:
        # bool is an int subclass
        if not isinstance(self.id, int) or isinstance(self.id, bool) or self.id < 0:
            raise InvalidTodoError(f"Todo id must be a non-negative integer, got {self.id!r}")
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidTodoError("Todo title must not be empty")
        if not isinstance(self.is_done, bool):
            raise InvalidTodoError(f"Todo is_done must be a boolean, got {self.is_done!r}")

    @property
    def is_saved(self) -> bool:
        return self.id > 0

    def copy_with(
        self,
        *,
        id: int | None = None,
        title: str | None = None,
        is_done: bool | None = None,
    ) -> "Todo":
        """Return a copy with the given fields replaced."""
        changes: dict[str, Any] = {}
        if id is not None:
            changes["id"] = id
        if title is not None:
            changes["title"] = title
        if is_done is not None:
            changes["is_done"] = is_done
        return replace(self, **changes)

    def to_map(self) -> dict[str, Any]:
        """Row representation used by the relational store."""
        return {
            "id": self.id,
            "title": self.title,
            "is_done": 1 if self.is_done else 0,
        }

    @classmethod
    def from_map(cls, row: Mapping[str, Any]) -> "Todo":
        """Build a todo from a row produced by ``to_map`` or a database query."""
        return cls(
            id=row["id"],
            title=row["title"],
            is_done=row["is_done"] == 1,
        )
