"""In-memory record store."""

from __future__ import annotations

from collections.abc import Iterator

from tada.models import TodoItem


class InvalidPositionError(IndexError):
    """Raised when a 1-based position falls outside the store."""

    def __init__(self, position: int, size: int):
        super().__init__(f"Invalid ID: {position} (have {size} to-dos)")
        self.position = position
        self.size = size


class TodoStore:
    """Ordered list of to-dos held for one session.

    Positions are 1-based and ephemeral: deleting an item shifts every
    later position down by one.
    """

    def __init__(self):
        self._items: list[TodoItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(self._items)

    def add(self, title: str, category: str, priority: str) -> TodoItem:
        item = TodoItem(title=title, done=False, category=category, priority=priority)
        self._items.append(item)
        return item

    def append(self, item: TodoItem) -> None:
        self._items.append(item)

    def mark_done(self, position: int) -> TodoItem:
        item = self._items[self._index(position)]
        item.done = True
        return item

    def delete(self, position: int) -> TodoItem:
        return self._items.pop(self._index(position))

    def clear(self) -> None:
        self._items.clear()

    def _index(self, position: int) -> int:
        if position < 1 or position > len(self._items):
            raise InvalidPositionError(position, len(self._items))
        return position - 1
