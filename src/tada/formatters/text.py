"""Plain line formatter."""

from rich.text import Text

from tada.models import TodoItem

EMPTY_MESSAGE = "No to-dos found!"
HEADING = "Your To-Do List:"


def format_line(position: int, item: TodoItem) -> str:
    """Render one item as ``N. [Done|Not Done] title (Category: c, Priority: p)``."""
    status = "Done" if item.done else "Not Done"
    return (
        f"{position}. [{status}] {item.title} "
        f"(Category: {item.category}, Priority: {item.priority})"
    )


class TextFormatter:
    """Numbered lines, one per item.

    Numbers are positions within the given list, so a filtered listing
    always starts at 1.
    """

    NAME = "text"

    def format(self, items: list[TodoItem]) -> Text:
        if not items:
            return Text(EMPTY_MESSAGE)
        lines = [HEADING]
        lines.extend(format_line(i, item) for i, item in enumerate(items, start=1))
        return Text("\n".join(lines))
