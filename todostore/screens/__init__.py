"""Console screens."""

from todostore.screens.base import BACK, HOME_ROUTE, OBJECTDB_ROUTE, QUIT, Screen
from todostore.screens.console import Console
from todostore.screens.objectdb import ObjectDBScreen
from todostore.screens.todo_list import TodoListScreen

__all__ = [
    "BACK",
    "Console",
    "HOME_ROUTE",
    "OBJECTDB_ROUTE",
    "ObjectDBScreen",
    "QUIT",
    "Screen",
    "TodoListScreen",
]
