"""Movement management commands."""

import logging

import click

from ..db import DuplicateMovementError, StorageError
from ..models import Movement
from ..utils import BOOL_TOKEN
from .base import async_command, echo_error, echo_info, echo_success, format_table, get_repository

logger = logging.getLogger(__name__)


@click.group()
def add():
    """Add records to the database."""
    pass


@add.command("move", context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.argument("is_upper", type=BOOL_TOKEN)
@click.argument("require_weight", type=BOOL_TOKEN)
@click.pass_context
@async_command
async def add_move(ctx: click.Context, name: str, is_upper: bool, require_weight: bool):
    """Add a movement for future use.

    IS_UPPER and REQUIRE_WEIGHT accept 1/true/yes for true; anything
    else counts as false.

    Example:

        lift add move squat false true
    """
    movement = Movement(name=name, is_upper=is_upper, require_weight=require_weight)
    logger.debug("add_movement: %r", movement)

    repo = get_repository(ctx)
    try:
        movement.id = await repo.create(movement)
    except DuplicateMovementError:
        echo_error(f"A movement named '{name}' already exists")
        ctx.exit(1)
    except StorageError as e:
        logger.debug("Insert failed", exc_info=True)
        echo_error(e.message)
        ctx.exit(1)

    echo_success(f"Added movement {movement.get_summary()} (ID: {movement.id})")


@click.group("del")
def delete():
    """Remove records from the database."""
    pass


@delete.command("move", context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.pass_context
@async_command
async def del_move(ctx: click.Context, name: str):
    """Remove a movement by its exact name."""
    logger.debug("del_movement: %r", name)

    repo = get_repository(ctx)
    try:
        removed = await repo.delete_by_name(name)
    except StorageError as e:
        logger.debug("Delete failed", exc_info=True)
        echo_error(e.message)
        ctx.exit(1)

    if not removed:
        echo_info(f"No movement named '{name}'")
        return

    echo_success(f"Movement '{name}' deleted")


@click.command()
@click.option("--table", "-t", "as_table", is_flag=True, help="Show movements as a table")
@click.pass_context
@async_command
async def movements(ctx: click.Context, as_table: bool):
    """Show all the movements in the database."""
    logger.debug("show_all_movements")

    repo = get_repository(ctx)
    try:
        all_movements = await repo.list_all()
    except StorageError as e:
        logger.debug("Listing failed", exc_info=True)
        echo_error(e.message)
        ctx.exit(1)

    if not all_movements:
        echo_info("No movements found. Add one with 'lift add move'")
        return

    if not as_table:
        for movement in all_movements:
            click.echo(repr(movement))
        return

    headers = ["ID", "Name", "Upper", "Weighted"]
    rows = [
        [
            str(m.id),
            m.name,
            "yes" if m.is_upper else "no",
            "yes" if m.require_weight else "no",
        ]
        for m in all_movements
    ]
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_movements)} movement(s)")
