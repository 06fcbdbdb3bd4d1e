"""UI module."""

from .interactive import CommandLoop, interactive_menu

__all__ = [
    "CommandLoop",
    "interactive_menu",
]
