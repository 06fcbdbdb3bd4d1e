"""JSON file backend."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from tada.backends.base import StorageError
from tada.models import TodoItem

logger = logging.getLogger("tada.backends.json_file")


class JsonFileBackend:
    """Stores the whole list as one JSON array.

    Each element is an object with ``title``, ``done``, ``category`` and
    ``priority``. A ``null`` document is read as an empty list.
    """

    def __init__(self, file_path: Path, atomic: bool = False):
        self._path = Path(file_path)
        self._atomic = atomic

    def load(self, sink: Callable[[TodoItem], None]) -> bool:
        # A file that cannot be opened counts as no storage yet
        try:
            f = self._path.open(encoding="utf-8")
        except OSError as e:
            logger.debug("Cannot open %s: %s", self._path, e)
            return False

        with f:
            try:
                data = json.load(f)
            except (OSError, ValueError, RecursionError) as e:
                raise StorageError(str(e)) from e

        if data is None:
            return True
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array, got {type(data).__name__}")

        # Items decoded before a bad element stay in the sink
        for index, raw in enumerate(data):
            try:
                item = TodoItem.from_dict(raw)
            except TypeError as e:
                raise StorageError(f"Element {index}: {e}") from e
            sink(item)

        logger.debug("Loaded %d to-dos from %s", len(data), self._path)
        return True

    def save(self, items: Iterable[TodoItem]) -> None:
        records = [item.to_dict() for item in items]
        try:
            content = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise StorageError(str(e)) from e

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic:
                self._write_atomic(content)
            else:
                self._path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageError(str(e)) from e

        logger.debug("Saved %d to-dos to %s", len(records), self._path)

    def _write_atomic(self, content: str) -> None:
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=".tada-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp, self._path)
        except OSError:
            Path(tmp).unlink(missing_ok=True)
            raise
