"""CLI entry point for lift."""

import logging
from pathlib import Path

import click

from . import __version__
from .commands import add, delete, help_command, movements, undo
from .commands.help import show_help
from .log import configure_logging

logger = logging.getLogger(__name__)


@click.group("lift", invoke_without_command=True)
@click.version_option(version=__version__, prog_name="lift")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="LIFT_DB",
    help="Database file (default: ./lift_data.db)",
)
@click.option("--verbose", "-v", is_flag=True, help="Print diagnostic output")
@click.pass_context
def main(ctx: click.Context, db_path: Path | None, verbose: bool):
    """lift: keep track of lifting movements.

    Example usage:

        # Record a movement
        lift add move squat false true

        # See what is stored
        lift movements

        # Remove it again
        lift del move squat
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path
    logger.debug("Database: %s, command: %s", db_path, ctx.invoked_subcommand)

    # Running without a command shows the help text instead of failing
    if ctx.invoked_subcommand is None:
        show_help(ctx)


# Register commands
main.add_command(add)
main.add_command(delete)
main.add_command(movements)
main.add_command(help_command)
main.add_command(undo)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
