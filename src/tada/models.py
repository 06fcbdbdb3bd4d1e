"""Data models for tada."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Priority(Enum):
    """Accepted priority levels.

    Only used to validate input. Items keep the priority string exactly
    as the user typed it.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, text: str) -> Priority:
        """Return the member matching text case-insensitively."""
        for member in cls:
            if member.value.lower() == text.lower():
                return member
        raise ValueError(f"Invalid priority '{text}'. Use: High/Medium/Low")


class Status(Enum):
    """Completion states accepted by the status filter."""

    PENDING = "pending"
    COMPLETED = "completed"

    def matches(self, item: TodoItem) -> bool:
        if self is Status.COMPLETED:
            return item.done
        return not item.done


# Field name -> expected JSON type, in declaration order
_FIELDS: dict[str, type] = {
    "title": str,
    "done": bool,
    "category": str,
    "priority": str,
}


@dataclass
class TodoItem:
    """Single to-do entry.

    Mutable: marking done flips ``done`` in place. Items carry no ID;
    their position in the list is the only address.
    """

    title: str
    done: bool = False
    category: str = ""
    priority: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict with keys in declaration order."""
        return {
            "title": self.title,
            "done": self.done,
            "category": self.category,
            "priority": self.priority,
        }

    @classmethod
    def from_dict(cls, data: Any) -> TodoItem:
        """Build an item from one decoded JSON object.

        Missing keys take zero values and unknown keys are ignored.
        A key holding the wrong JSON type raises TypeError.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        values: dict[str, Any] = {}
        for name, expected in _FIELDS.items():
            if name not in data or data[name] is None:
                continue
            value = data[name]
            if not isinstance(value, expected):
                raise TypeError(
                    f"Field '{name}' must be {expected.__name__}, got {type(value).__name__}"
                )
            values[name] = value

        return cls(
            title=values.get("title", ""),
            done=values.get("done", False),
            category=values.get("category", ""),
            priority=values.get("priority", ""),
        )
