"""Shared formatting utilities for priority display."""

from rich.markup import escape

from tada.models import Priority

# Priority styles (Rich markup), keyed by Priority value
PRIORITY_STYLES: dict[str, str] = {
    "High": "red bold",
    "Medium": "yellow",
    "Low": "dim",
}


def format_priority(priority: str) -> str:
    """Format a stored priority string as Rich markup.

    Unrecognized values (e.g. from a hand-edited file) are shown unstyled.
    """
    try:
        style = PRIORITY_STYLES[Priority.parse(priority).value]
    except ValueError:
        return escape(priority)
    return f"[{style}]{escape(priority)}[/{style}]"


def format_done(done: bool) -> str:
    # Colorblind-safe: blue checkmark for done
    return "[blue]✓[/blue]" if done else "[dim]•[/dim]"
