"""Base backend protocol."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

from tada.models import TodoItem


class StorageError(Exception):
    """Raised when a backend cannot read or write its storage."""


@runtime_checkable
class TodoBackend(Protocol):
    """Protocol for whole-list storage backends.

    Backends load and save the entire list at once; there is no
    per-item access.
    """

    def load(self, sink: Callable[[TodoItem], None]) -> bool:
        """Feed stored items to sink in order.

        Returns False if there is no storage yet. Raises StorageError on
        a decode failure; items already passed to sink stay there.
        """
        ...

    def save(self, items: Iterable[TodoItem]) -> None:
        """Overwrite storage with items. Raises StorageError on failure."""
        ...
