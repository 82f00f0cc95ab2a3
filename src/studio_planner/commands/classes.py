"""Class definition commands."""

import click

from ..models.class_definition import ClassDefinition
from ..models.movements import Movement
from ..models.schedule import parse_date
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


def describe_schedule(class_def: ClassDefinition) -> str:
    """One-line summary, e.g. "Every Mon, Wed at 09:00 (55 min) until 2024-06-30"."""
    start = class_def.start
    rule = class_def.schedule.recurrence
    time_part = f"{start:%H:%M} ({class_def.duration_minutes} min)"
    if rule is None:
        return f"{start:%a %Y-%m-%d} at {time_part}"
    text = f"Every {', '.join(rule.day_names)} at {time_part} from {start:%Y-%m-%d}"
    if rule.end_date is not None:
        text += f" until {rule.end_date.isoformat()}"
    return text


@click.group()
@click.pass_context
def classes(ctx):
    """Manage class definitions."""
    ensure_initialized(ctx)


@classes.command(name="list")
@click.option("--date", "-d", "on_date", default=None, help="Only classes on this date (YYYY-MM-DD)")
@async_command
async def list_classes(on_date: str | None):
    """List class definitions."""
    planner = get_planner()
    if on_date:
        found = await planner.classes_on(parse_date(on_date))
    else:
        found = sorted(await planner.store.classes.list_all(), key=lambda c: c.start)

    if not found:
        echo_info("No classes found")
        return

    headers = ["ID", "Title", "Level", "Category", "Schedule"]
    rows = [
        [c.id, truncate(c.title), c.level, c.category, describe_schedule(c)]
        for c in found
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(found)} class(es)")


@classes.command()
@click.argument("class_id")
@click.pass_context
@async_command
async def show(ctx, class_id: str):
    """Show a class and its movement sequence."""
    planner = get_planner()
    class_def = await planner.store.classes.get(class_id)
    if class_def is None:
        echo_error(f"Class {class_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{class_def.title} ({class_def.level}, {class_def.category})")
    click.echo("=" * 60)
    click.echo(describe_schedule(class_def))
    if class_def.room_location:
        click.echo(f"Room: {class_def.room_location}")
    if class_def.max_participants:
        click.echo(f"Max participants: {class_def.max_participants}")
    if class_def.description:
        click.echo()
        click.echo(class_def.description)

    click.echo()
    click.echo("Sequence:")
    click.echo("-" * 40)
    resolved = await planner.class_movements(class_id)
    if not resolved:
        click.echo("  (empty)")
    for position, entry in enumerate(resolved or [], start=1):
        if isinstance(entry, Movement):
            marker = " [!]" if entry.is_high_risk else ""
            click.echo(f"  {position}. {entry.name}{marker}")
        else:
            click.echo(f"  {position}. (deleted movement {entry.movement_id})")


@classes.command()
@click.argument("class_id")
@click.pass_context
@async_command
async def stats(ctx, class_id: str):
    """Show sequence statistics for a class."""
    planner = get_planner()
    result = await planner.class_stats(class_id)
    if result is None:
        echo_error(f"Class {class_id} not found")
        ctx.exit(1)

    click.echo(f"Movements:          {result.movement_count}")
    click.echo(f"Estimated minutes:  {result.estimated_minutes}")
    click.echo(f"High precaution:    {result.high_risk_count}")
    if result.high_risk_count:
        echo_warning("Sequence contains high-precaution movements")


@classes.command()
@click.argument("class_id")
@click.pass_context
@async_command
async def copy(ctx, class_id: str):
    """Copy a class as a new one-off class today."""
    created = await get_planner().duplicate_class(class_id)
    if created is None:
        echo_error(f"Class {class_id} not found")
        ctx.exit(1)
    echo_success(f"Created '{created.title}' ({created.id})")


@classes.command(name="from-template")
@click.argument("template_id")
@click.pass_context
@async_command
async def from_template(ctx, template_id: str):
    """Create a one-off class today from a template."""
    created = await get_planner().create_from_template(template_id)
    if created is None:
        echo_error(f"Template {template_id} not found")
        ctx.exit(1)
    echo_success(f"Created '{created.title}' ({created.id}) at {created.start:%Y-%m-%d %H:%M}")


@classes.command()
@click.argument("class_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, class_id: str, force: bool):
    """Delete a class (all of its occurrences)."""
    planner = get_planner()
    class_def = await planner.store.classes.get(class_id)
    if class_def is None:
        echo_error(f"Class {class_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Class: {class_def.title} ({describe_schedule(class_def)})")
        if not click.confirm("Are you sure you want to delete this class?"):
            echo_info("Cancelled")
            return

    await planner.store.classes.delete(class_id)
    echo_success(f"Class {class_id} deleted")
