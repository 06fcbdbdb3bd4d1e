"""Rich table formatter."""

from typing import Any

from rich.markup import escape
from rich.table import Table

from tada.models import TodoItem


class TableFormatter:
    """Format todos as a Rich table.

    The first column is the position within the given list.
    """

    NAME = "table"

    def _format_done(self, done: bool) -> str:
        from tada.ui.formatting import format_done

        return format_done(done)

    def _format_priority(self, priority: str) -> str:
        from tada.ui.formatting import format_priority

        return format_priority(priority)

    def format(self, items: list[TodoItem]) -> Any:
        if not items:
            return "[dim]No to-dos found![/dim]"

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Done", width=6)
        table.add_column("Title")
        table.add_column("Category")
        table.add_column("Priority")

        for position, item in enumerate(items, start=1):
            table.add_row(
                str(position),
                self._format_done(item.done),
                escape(item.title),
                escape(item.category),
                self._format_priority(item.priority),
            )

        return table
