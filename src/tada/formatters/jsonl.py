"""JSON lines formatter."""

import json

from rich.text import Text

from tada.formatters.text import EMPTY_MESSAGE
from tada.models import TodoItem


class JsonlFormatter:
    """Format todos as JSON lines (one JSON object per line)."""

    NAME = "jsonl"

    def format(self, items: list[TodoItem]) -> Text:
        if not items:
            return Text(EMPTY_MESSAGE)
        return Text("\n".join(json.dumps(item.to_dict()) for item in items))
