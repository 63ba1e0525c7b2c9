"""Normalized storage error types."""


class StoreError(Exception):
    """Base class for all storage errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class StoreNotOpenError(StoreError):
    """Operation attempted on a store that is not open."""

    def __init__(self, message: str = "Store not open") -> None:
        super().__init__(message, code="not_open")


class TodoNotFoundError(StoreError):
    """No todo stored under the requested id."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found", code="not_found")
        self.todo_id = todo_id


class SchemaVersionError(StoreError):
    """Database file was written by a newer schema than this code knows."""

    def __init__(self, found: int, expected: int) -> None:
        super().__init__(
            f"Database schema version {found} is newer than supported version {expected}",
            code="schema_version",
        )
        self.found = found
        self.expected = expected


class InvalidTodoError(StoreError, ValueError):
    """Todo fields violate the record invariants."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="invalid")


class DuplicateTodoError(StoreError):
    """Insert with an explicit id that is already stored."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} already exists", code="duplicate")
        self.todo_id = todo_id
