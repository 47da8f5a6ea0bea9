"""Undo command."""

import click

from .base import echo_error


@click.command()
@click.pass_context
def undo(ctx: click.Context):
    """Revert the database to before the last command (not implemented)."""
    echo_error("undo is not implemented")
    ctx.exit(1)
