"""Persistence layer: SQLite and ZODB todo stores."""

from todostore.persistence.base import TodoStore
from todostore.persistence.database import Database
from todostore.persistence.objectdb import ObjectDBTodoRepository, ObjectStore, TodoBox
from todostore.persistence.registry import create_store, get_available_stores, register_store
from todostore.persistence.repository import SqliteTodoRepository

__all__ = [
    "Database",
    "ObjectDBTodoRepository",
    "ObjectStore",
    "SqliteTodoRepository",
    "TodoBox",
    "TodoStore",
    "create_store",
    "get_available_stores",
    "register_store",
]
