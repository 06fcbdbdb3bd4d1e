"""Core todo service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from tada import queries
from tada.backends.base import StorageError
from tada.config import Config
from tada.models import TodoItem
from tada.store import TodoStore

if TYPE_CHECKING:
    from tada.backends.base import TodoBackend

logger = logging.getLogger("tada.core")

# Maps backend name -> backend class (or "module:Class" string for lazy loading)
_backend_registry: dict[str, type | str] = {
    "json": "tada.backends.json_file:JsonFileBackend",
}


def _resolve_backend_class(backend_ref: str | type) -> type:
    """Resolve backend reference to actual class (lazy import)."""
    if isinstance(backend_ref, type):
        return backend_ref
    module_path, class_name = backend_ref.rsplit(":", 1)
    import importlib

    module = importlib.import_module(module_path)
    return getattr(module, class_name)


class TodoService:
    """Owns the session's store and routes load/save to the backend."""

    def __init__(
        self,
        config: Config,
        storage_path: Path | None = None,
        backend_name: str = "json",
    ):
        self._config = config
        self._storage_path = Path(storage_path) if storage_path else config.storage_path
        self._backend_name = backend_name
        self._backend = self._create_backend()
        self._store = TodoStore()

    # Mutations

    def add(self, title: str, category: str, priority: str) -> TodoItem:
        return self._store.add(title, category, priority)

    def mark_done(self, position: int) -> TodoItem:
        return self._store.mark_done(position)

    def delete(self, position: int) -> TodoItem:
        return self._store.delete(position)

    # Queries

    def list_all(self) -> list[TodoItem]:
        return queries.list_all(self._store)

    def filter_by_category(self, category: str) -> list[TodoItem]:
        return queries.filter_by_category(self._store, category)

    def filter_by_status(self, status: str) -> list[TodoItem]:
        return queries.filter_by_status(self._store, status)

    def search(self, keyword: str) -> list[TodoItem]:
        return queries.search(self._store, keyword)

    # Persistence

    def load(self) -> bool:
        """Replace the store with the backend's contents.

        Returns False when there is nothing stored yet. On StorageError the
        store keeps whatever was decoded before the failure.
        """
        self._store.clear()
        try:
            return self._backend.load(self._store.append)
        except StorageError as e:
            logger.debug("Failed to load %s: %s", self._storage_path, e)
            raise

    def save(self) -> None:
        """Write the whole store to the backend."""
        try:
            self._backend.save(self._store)
        except StorageError as e:
            logger.debug("Failed to save %s: %s", self._storage_path, e)
            raise

    def _create_backend(self) -> TodoBackend:
        if self._backend_name not in _backend_registry:
            raise ValueError(f"Unknown backend: {self._backend_name}")
        backend_cls = _resolve_backend_class(_backend_registry[self._backend_name])
        return backend_cls(self._storage_path, atomic=bool(self._config.atomic_save))
