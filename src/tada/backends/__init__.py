"""Storage backends for tada."""

from .base import StorageError, TodoBackend
from .json_file import JsonFileBackend

__all__ = [
    "JsonFileBackend",
    "StorageError",
    "TodoBackend",
]
