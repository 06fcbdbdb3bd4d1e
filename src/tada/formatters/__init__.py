"""Output formatters for tada listings."""

from .base import FormatterProtocol
from .jsonl import JsonlFormatter
from .table import TableFormatter
from .text import TextFormatter

FORMATTERS: dict[str, type] = {
    "text": TextFormatter,
    "table": TableFormatter,
    "jsonl": JsonlFormatter,
}


def get_formatter(name: str) -> FormatterProtocol:
    """Return a formatter instance by name.

    Raises ValueError for unknown names.
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        available = list(FORMATTERS.keys())
        raise ValueError(f"Unknown format: {name}. Available: {', '.join(available)}")
    return cls()


__all__ = [
    "FormatterProtocol",
    "TextFormatter",
    "TableFormatter",
    "JsonlFormatter",
    "FORMATTERS",
    "get_formatter",
]
