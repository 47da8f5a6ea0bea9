"""CLI commands for lift."""

from .help import help_command
from .movements import add, delete, movements
from .undo import undo

__all__ = [
    "add",
    "delete",
    "help_command",
    "movements",
    "undo",
]
