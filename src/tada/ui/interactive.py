"""Interactive numbered menu."""

from __future__ import annotations

import re
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from tada.backends.base import StorageError
from tada.core import TodoService
from tada.formatters import FormatterProtocol, TextFormatter
from tada.models import Priority, TodoItem
from tada.store import InvalidPositionError

console = Console()

WELCOME = "Welcome to the Interactive To-Do List!"

MENU_OPTIONS: list[tuple[str, str]] = [
    ("1", "List All To-Dos"),
    ("2", "Add a To-Do"),
    ("3", "Mark a To-Do as Done"),
    ("4", "Delete a To-Do"),
    ("5", "Filter To-Dos by Category"),
    ("6", "List Only Pending or Completed To-Dos"),
    ("7", "Search To-Dos by Title"),
    ("8", "Save and Exit"),
]
EXIT_CHOICE = "8"

# Leading signed integer, like a %d scan
_POSITION_RE = re.compile(r"[+-]?\d+")


def parse_position(text: str) -> int:
    """Read a leading integer from text; 0 (always invalid) if there is none."""
    match = _POSITION_RE.match(text.strip())
    return int(match.group()) if match else 0


class CommandLoop:
    """Reads menu choices and dispatches them until Save and Exit.

    Args:
        svc: Service owning the session's to-dos.
        formatter: Renders query results. Defaults to numbered text lines.
        console: Where all output goes.
        read_line: Function(prompt) -> line. Raises EOFError when input ends.
    """

    def __init__(
        self,
        svc: TodoService,
        formatter: FormatterProtocol | None = None,
        console: Console = console,
        read_line: Callable[[str], str] | None = None,
    ):
        self.svc = svc
        self.formatter = formatter or TextFormatter()
        self.console = console
        self.read_line = read_line or (lambda prompt: self.console.input(f"{prompt} "))
        self._handlers: dict[str, Callable[[], None]] = {
            "1": self.list_all,
            "2": self.add,
            "3": self.mark_done,
            "4": self.delete,
            "5": self.filter_by_category,
            "6": self.filter_by_status,
            "7": self.search,
        }

    def run(self) -> bool:
        """Load, loop until exit, save. Returns True if the final save succeeded."""
        self.load()
        self.console.print(f"[bold]{WELCOME}[/bold]")

        while True:
            self.show_menu()
            try:
                choice = self.ask("Choose an option:")
                if choice == EXIT_CHOICE:
                    return self.save_and_exit()
                handler = self._handlers.get(choice)
                if handler is None:
                    self.console.print("[red]✗[/red] Invalid choice. Please try again.")
                    continue
                handler()
            except (EOFError, KeyboardInterrupt):
                # Input closed: keep the data and leave
                self.console.print()
                return self.save_and_exit()

    def show_menu(self) -> None:
        self.console.print("\n[bold]Menu:[/bold]")
        for key, label in MENU_OPTIONS:
            self.console.print(f"{key}. {label}")

    def ask(self, prompt: str) -> str:
        return self.read_line(prompt).strip()

    def show(self, items: list[TodoItem]) -> None:
        self.console.print(self.formatter.format(items), soft_wrap=True)

    # Menu actions

    def list_all(self) -> None:
        self.show(self.svc.list_all())

    def add(self) -> None:
        title = self.ask("Enter the title of the to-do:")
        category = self.ask("Enter the category (e.g., Work, Personal):")
        priority = self.ask_priority()
        self.svc.add(title, category, priority)
        self.console.print("[green]✓[/green] To-Do added successfully!")

    def ask_priority(self) -> str:
        """Prompt until the answer is High, Medium or Low in any case.

        Returns the answer as typed.
        """
        while True:
            priority = self.ask("Enter the priority (High, Medium, Low):")
            try:
                Priority.parse(priority)
            except ValueError:
                self.console.print(
                    "[red]✗[/red] Invalid priority. Please enter 'High', 'Medium', or 'Low'."
                )
                continue
            return priority

    def mark_done(self) -> None:
        position = parse_position(self.ask("Enter the ID of the to-do to mark as done:"))
        try:
            self.svc.mark_done(position)
        except InvalidPositionError:
            self.console.print("[red]✗[/red] Invalid ID.")
            return
        self.console.print("[green]✓[/green] To-Do marked as done!")

    def delete(self) -> None:
        position = parse_position(self.ask("Enter the ID of the to-do to delete:"))
        try:
            self.svc.delete(position)
        except InvalidPositionError:
            self.console.print("[red]✗[/red] Invalid ID.")
            return
        self.console.print("[yellow]✓[/yellow] To-Do deleted successfully!")

    def filter_by_category(self) -> None:
        category = self.ask("Enter the category to filter by:")
        self.show(self.svc.filter_by_category(category))

    def filter_by_status(self) -> None:
        status = self.ask(
            "Enter 'pending' to list only pending to-dos or 'completed' for completed ones:"
        )
        self.show(self.svc.filter_by_status(status))

    def search(self) -> None:
        keyword = self.ask("Enter a keyword to search:")
        self.show(self.svc.search(keyword))

    # Persistence

    def load(self) -> None:
        try:
            found = self.svc.load()
        except StorageError as e:
            self.console.print(f"[red]✗[/red] Error decoding to-dos: {escape(str(e))}")
            return
        if not found:
            self.console.print("[dim]No existing to-dos found.[/dim]")

    def save_and_exit(self) -> bool:
        try:
            self.svc.save()
        except StorageError as e:
            self.console.print(f"[red]✗[/red] Error saving to-dos: {escape(str(e))}")
            self.console.print("Goodbye!")
            return False
        self.console.print("[green]✓[/green] To-Dos saved successfully! Goodbye!")
        return True


def interactive_menu(
    svc: TodoService,
    formatter: FormatterProtocol | None = None,
) -> bool:
    """Run the menu on the terminal until the user picks Save and Exit."""
    return CommandLoop(svc, formatter=formatter).run()
