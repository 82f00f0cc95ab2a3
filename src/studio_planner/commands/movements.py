"""Movement library commands."""

from pathlib import Path

import click
import questionary
from questionary import Style

from ..data.movement_loader import import_movements
from ..models.movements import Movement, PrecautionLevel
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    get_planner,
    truncate,
)

prompt_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
    ]
)

LEVELS = ["Beginner", "Intermediate", "Advanced", "All Levels"]


def _split(text: str | None) -> list[str]:
    """Split a comma-separated answer into trimmed items."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]


async def prompt_movement() -> Movement | None:
    """Ask for a new movement interactively. None if the user aborts."""
    name = await questionary.text("Movement name:", style=prompt_style).ask_async()
    if not name:
        return None
    category = await questionary.text("Category (e.g. Footwork, Abdominals):", style=prompt_style).ask_async()
    level = await questionary.select("Level:", choices=LEVELS, style=prompt_style).ask_async()
    precaution = await questionary.select(
        "Precaution level:",
        choices=[questionary.Choice(p.value, p) for p in PrecautionLevel],
        style=prompt_style,
    ).ask_async()
    description = await questionary.text("Description:", style=prompt_style).ask_async()
    equipment = await questionary.text("Equipment (comma-separated):", style=prompt_style).ask_async()
    if level is None or precaution is None:
        return None

    return Movement(
        name=name.strip(),
        category=(category or "").strip(),
        level=level,
        precaution_level=precaution,
        description=(description or "").strip(),
        equipment=set(_split(equipment)),
    )


@click.group()
@click.pass_context
def movements(ctx):
    """Browse and manage the movement library."""
    ensure_initialized(ctx)


@movements.command(name="list")
@click.option("--search", "-s", default="", help="Filter by name or category")
@click.option("--category", "-c", default=None, help="Only this category")
@async_command
async def list_movements(search: str, category: str | None):
    """List movements in the library."""
    planner = get_planner()
    found = await planner.search_movements(search, category=category)

    if not found:
        echo_info("No movements found")
        return

    headers = ["ID", "Name", "Category", "Level", "Precaution"]
    rows = [
        [
            m.id,
            truncate(m.name),
            m.category,
            m.level,
            m.precaution_level.value,
        ]
        for m in found
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(found)} movement(s)")


@movements.command(name="categories")
@async_command
async def list_categories():
    """List movement categories."""
    for category in await get_planner().categories():
        click.echo(category)


@movements.command()
@click.argument("movement_id")
@click.pass_context
@async_command
async def show(ctx, movement_id: str):
    """Show details of a movement."""
    movement = await get_planner().store.movements.get(movement_id)
    if movement is None:
        echo_error(f"Movement {movement_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{movement.name} ({movement.category}, {movement.level})")
    click.echo("=" * 60)
    click.echo(f"Precaution level: {movement.precaution_level.value}")
    if movement.description:
        click.echo()
        click.echo(movement.description)
    for title, items in (
        ("Instructions", movement.instructions),
        ("Precautions", movement.precautions),
        ("Modifications", movement.modifications),
    ):
        if items:
            click.echo()
            click.echo(f"{title}:")
            for item in items:
                click.echo(f"  - {item}")
    if movement.equipment:
        click.echo()
        click.echo(f"Equipment: {', '.join(sorted(movement.equipment))}")


@movements.command()
@async_command
async def add():
    """Add a movement interactively."""
    movement = await prompt_movement()
    if movement is None:
        echo_info("Cancelled")
        return
    created = await get_planner().store.movements.create(movement)
    echo_success(f"Movement '{created.name}' added ({created.id})")


@movements.command(name="import")
@click.argument("json_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@async_command
async def import_file(json_path: Path):
    """Import movements from a JSON file."""
    count = await import_movements(json_path, get_planner().store.movements)
    echo_success(f"Imported {count} movement(s) from {json_path.name}")


@movements.command()
@click.argument("movement_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, movement_id: str, force: bool):
    """Delete a movement.

    Classes and templates that use it keep the reference and show it as
    a deleted movement.
    """
    planner = get_planner()
    movement = await planner.store.movements.get(movement_id)
    if movement is None:
        echo_error(f"Movement {movement_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Movement: {movement.name}")
        if not click.confirm("Are you sure you want to delete this movement?"):
            echo_info("Cancelled")
            return

    if movement.is_catalog_seed:
        echo_warning(f"'{movement.name}' is part of the bundled repertoire")
    await planner.delete_movement(movement_id)
    echo_success(f"Movement {movement_id} deleted")
