"""Tests for store registry."""

from pathlib import Path

import pytest

from todostore.persistence.base import TodoStore
from todostore.persistence.objectdb import ObjectDBTodoRepository
from todostore.persistence.registry import (
    create_store,
    get_available_stores,
    register_store,
    unregister_store,
)
from todostore.persistence.repository import SqliteTodoRepository


def test_get_available_stores():
    """Test listing available stores."""
    print("\n" + "=" * 60)
    print("Test: Get Available Stores")
    print("=" * 60)

    stores = get_available_stores()
    print(f"Available stores: {stores}")

    assert isinstance(stores, list)
    assert "sqlite" in stores
    assert "zodb" in stores
    print("✅ PASS: sqlite and zodb are available")


def test_create_store(tmp_path):
    """Test creating stores by name."""
    sqlite_store = create_store("sqlite", tmp_path / "a.db")
    zodb_store = create_store("zodb", tmp_path / "a.fs")

    assert isinstance(sqlite_store, SqliteTodoRepository)
    assert isinstance(zodb_store, ObjectDBTodoRepository)
    assert sqlite_store.name == "sqlite"
    assert zodb_store.name == "zodb"
    assert not sqlite_store.is_open
    assert not zodb_store.is_open


def test_create_unknown_store():
    """Test that unknown store raises error."""
    with pytest.raises(ValueError) as exc_info:
        create_store("unknown_store", Path("x"))

    print(f"Error message: {exc_info.value}")
    assert "not found" in str(exc_info.value)
    assert "sqlite" in str(exc_info.value)
    print("✅ PASS: ValueError raised with helpful message")


def test_register_custom_store():
    """Test registering a custom store."""

    class MemoryStore(TodoStore):
        def __init__(self, path):
            self.path = path
            self._open = False

        @property
        def is_open(self):
            return self._open

        async def open(self):
            self._open = True

        async def close(self):
            self._open = False

        async def insert_todo(self, todo):
            return 1

        async def get_all_todos(self):
            return []

        async def get_todo(self, todo_id):
            return None

        async def update_todo(self, todo):
            return 0

        async def delete_todo(self, todo_id):
            return 0

        async def count_todos(self):
            return 0

        async def clear(self):
            return 0

    register_store("test_memory", MemoryStore)
    try:
        assert "test_memory" in get_available_stores()
        store = create_store("test_memory", None)
        assert isinstance(store, MemoryStore)

        with pytest.raises(ValueError):
            register_store("test_memory", MemoryStore)
    finally:
        unregister_store("test_memory")

    assert "test_memory" not in get_available_stores()


def test_register_rejects_non_store():
    with pytest.raises(TypeError):
        register_store("not_a_store", dict)


def test_unregister_unknown_store_is_ignored():
    before = get_available_stores()

    unregister_store("never_registered")

    assert get_available_stores() == before
