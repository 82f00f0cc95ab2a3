"""Class template commands."""

import click

from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_planner,
    truncate,
)


@click.group()
@click.pass_context
def templates(ctx):
    """Manage class templates."""
    ensure_initialized(ctx)


@templates.command(name="list")
@async_command
async def list_templates():
    """List all templates."""
    found = await get_planner().store.templates.list_all()

    if not found:
        echo_info("No templates found. Save one with 'studio-planner templates from-class'")
        return

    headers = ["ID", "Name", "Level", "Duration", "Movements"]
    rows = [
        [t.id, truncate(t.name), t.level, f"{t.duration_minutes} min", str(len(t.sequence))]
        for t in found
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(found)} template(s)")


@templates.command()
@click.argument("template_id")
@click.pass_context
@async_command
async def show(ctx, template_id: str):
    """Show a template and its sequence."""
    planner = get_planner()
    template = await planner.store.templates.get(template_id)
    if template is None:
        echo_error(f"Template {template_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(f"{template.name} ({template.level}, {template.duration_minutes} min)")
    if template.description:
        click.echo(template.description)
    if template.tags:
        click.echo(f"Tags: {', '.join(sorted(template.tags))}")
    click.echo()
    click.echo("Sequence:")
    for position, entry in enumerate(template.sequence.resolve(await planner.catalog()), start=1):
        name = getattr(entry, "name", None) or f"(deleted movement {entry.movement_id})"
        click.echo(f"  {position}. {name}")


@templates.command(name="from-class")
@click.argument("class_id")
@click.option("--name", "-n", default=None, help="Template name (default: '<title> Template')")
@click.option("--description", default=None, help="Template description")
@click.option("--tag", "tags", multiple=True, help="Tag to attach (repeatable)")
@click.pass_context
@async_command
async def from_class(ctx, class_id: str, name: str | None, description: str | None, tags: tuple[str, ...]):
    """Save a class's level, duration and sequence as a template."""
    template = await get_planner().save_class_as_template(
        class_id, name=name, description=description, tags=set(tags)
    )
    if template is None:
        echo_error(f"Class {class_id} not found")
        ctx.exit(1)
    echo_success(f"Template '{template.name}' saved ({template.id})")


@templates.command()
@click.argument("template_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, template_id: str, force: bool):
    """Delete a template. Classes created from it are unaffected."""
    planner = get_planner()
    template = await planner.store.templates.get(template_id)
    if template is None:
        echo_error(f"Template {template_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Template: {template.name}")
        if not click.confirm("Are you sure you want to delete this template?"):
            echo_info("Cancelled")
            return

    await planner.store.templates.delete(template_id)
    echo_success(f"Template {template_id} deleted")
