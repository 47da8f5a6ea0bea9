"""Static help text."""

import click

from .. import AUTHOR, PROGRAM_NAME
from ..db import DB_NAME
from .base import get_db_option

DESCRIPTION = """\
Description:
Lift is a command line interface program for keeping track of different
kinds of movements and lift data.

OPTIONS:

  add: usage --> lift add move <name> <is_upper true/false> <require_weight true/false>
      Adds a movement to the database for future use.

  movements: usage --> lift movements [--table]
      Shows all the movements in the database.

  del: usage --> lift del move <name>
      Removes a movement from the database using its name.

  help: usage --> lift help
      Shows this text.

  undo: usage --> lift undo
      Not implemented yet.
"""


def render_help(db_file: str = DB_NAME) -> str:
    """Build the help text for the given database file."""
    return "\n".join(
        [
            f"Program Name: {PROGRAM_NAME}",
            f"DataBase File: {db_file}",
            f"Author: {AUTHOR}",
            "",
            DESCRIPTION,
        ]
    )


def show_help(ctx: click.Context) -> None:
    """Print the help text."""
    db_path = get_db_option(ctx)
    click.echo(render_help(str(db_path) if db_path else DB_NAME))


@click.command(
    "help", add_help_option=False, context_settings={"ignore_unknown_options": True}
)
@click.argument("ignored", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def help_command(ctx: click.Context, ignored: tuple[str, ...]):
    """Print usage for every command."""
    show_help(ctx)
