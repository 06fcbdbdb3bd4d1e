"""CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from tada.config import Config
    from tada.core import TodoService

app = typer.Typer(
    name="tada",
    help="Interactive to-do list manager.",
    no_args_is_help=False,
)
console = Console()


def _get_config() -> Config:
    """Lazy import and load config."""
    from tada.config import Config

    return Config.load()


def _get_service(config: Config, path: Path | None) -> TodoService:
    """Lazy import and create service."""
    from tada.core import TodoService

    return TodoService(config, storage_path=path)


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        from tada import __version__

        console.print(f"tada {__version__}")
        raise typer.Exit()


@app.command()
def main(
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="To-do file (default: todos.json)")
    ] = None,
    format_: Annotated[
        str | None, typer.Option("--format", "-F", help="Display format: text/table/jsonl")
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version"
        ),
    ] = False,
):
    """Launch the interactive to-do menu."""
    from tada.formatters import get_formatter
    from tada.ui.interactive import interactive_menu

    cfg = _get_config()
    _configure_logging(cfg.log_level)

    try:
        formatter = get_formatter(format_ or cfg.default_format)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    svc = _get_service(cfg, file)
    interactive_menu(svc, formatter=formatter)


if __name__ == "__main__":
    app()
