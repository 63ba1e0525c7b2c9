"""Store registry for runtime backend selection.

Backends are registered by name and instantiated at runtime from the
``backend`` setting or the ``--backend`` flag.

To add a new backend:
1. Implement a TodoStore subclass whose constructor takes the storage path
2. Register it with register_store("my_backend", MyStore)
"""

from pathlib import Path
from typing import Type

from todostore.persistence.base import TodoStore

STORE_REGISTRY: dict[str, Type[TodoStore]] = {}


def _lazy_load_stores() -> None:
    """Lazily load built-in stores to avoid circular imports."""
    if STORE_REGISTRY:
        return

    from todostore.persistence.objectdb import ObjectDBTodoRepository
    from todostore.persistence.repository import SqliteTodoRepository

    STORE_REGISTRY.update({
        "sqlite": SqliteTodoRepository,
        "zodb": ObjectDBTodoRepository,
    })


def register_store(name: str, factory: Type[TodoStore]) -> None:
    """
    Register a store in the registry.

    Args:
        name: Unique backend name
        factory: Store class (must inherit from TodoStore)

    Raises:
        ValueError: If name is already registered
        TypeError: If factory is not a TodoStore subclass
    """
    _lazy_load_stores()

    if name in STORE_REGISTRY:
        raise ValueError(f"Store '{name}' is already registered")

    if not (isinstance(factory, type) and issubclass(factory, TodoStore)):
        raise TypeError("Store factory must be a subclass of TodoStore")

    STORE_REGISTRY[name] = factory


def unregister_store(name: str) -> None:
    """Remove a registered store; unknown names are ignored."""
    STORE_REGISTRY.pop(name, None)


def get_available_stores() -> list[str]:
    """
    Get list of all registered backend names.

    Returns:
        List of backend names sorted alphabetically
    """
    _lazy_load_stores()
    return sorted(STORE_REGISTRY.keys())


def create_store(name: str, path: Path | None) -> TodoStore:
    """
    Create an (unopened) store by backend name.

    Raises:
        ValueError: If the backend name is not registered
    """
    _lazy_load_stores()

    if name not in STORE_REGISTRY:
        available = get_available_stores()
        raise ValueError(
            f"Store '{name}' not found. "
            f"Available stores: {available}"
        )

    return STORE_REGISTRY[name](path)
