"""Initialize studio command."""

import click

from ..db import get_db_path, init_db, seed_movements
from ..settings import get_settings
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the studio database.

    Creates the data directory and the SQLite schema, and seeds the
    movement library with the standard repertoire. Safe to run again.
    """
    data_dir = get_settings().data_dir
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing studio-planner in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_movements(db_path)
    if count:
        echo_success(f"Movement library populated ({count} movements)")
    else:
        echo_info("Movement library already populated")

    click.echo()
    click.echo("studio-planner is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  studio-planner movements list")
    click.echo("  studio-planner serve")
