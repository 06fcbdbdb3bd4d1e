"""Read-only queries over a list of to-dos (pure functions, no I/O)."""

from __future__ import annotations

from collections.abc import Iterable

from tada.models import Status, TodoItem


def list_all(items: Iterable[TodoItem]) -> list[TodoItem]:
    return list(items)


def filter_by_category(items: Iterable[TodoItem], category: str) -> list[TodoItem]:
    """Items whose category equals category, ignoring case (no substring match)."""
    wanted = category.casefold()
    return [i for i in items if i.category.casefold() == wanted]


def filter_by_status(items: Iterable[TodoItem], status: str) -> list[TodoItem]:
    """Items matching the literal "pending" or "completed".

    Any other string yields an empty list.
    """
    try:
        target = Status(status)
    except ValueError:
        return []
    return [i for i in items if target.matches(i)]


def search(items: Iterable[TodoItem], keyword: str) -> list[TodoItem]:
    """Items whose title contains keyword, ignoring case."""
    needle = keyword.lower()
    return [i for i in items if needle in i.title.lower()]
