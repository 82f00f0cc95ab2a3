"""Calendar commands: month and week views of class occurrences."""

from datetime import date

import click

from ..models.schedule import WEEKDAY_NAMES, day_of_week, parse_date
from ..services.recurrence import Occurrence
from .base import async_command, echo_error, echo_info, ensure_initialized, format_table, get_planner


def _rows(days: dict[date, list[Occurrence]], titles: dict[str, str], month: int | None = None):
    rows = []
    for day, occurrences in days.items():
        if month is not None and day.month != month:
            continue
        for occurrence in occurrences:
            rows.append([
                day.isoformat(),
                WEEKDAY_NAMES[day_of_week(day)],
                f"{occurrence.start:%H:%M}-{occurrence.end:%H:%M}",
                titles.get(occurrence.class_definition_id, occurrence.class_definition_id),
            ])
    return rows


@click.group()
@click.pass_context
def calendar(ctx):
    """Show scheduled classes, recurring ones expanded."""
    ensure_initialized(ctx)


@calendar.command()
@click.argument("year", type=int, required=False)
@click.argument("month", type=click.IntRange(1, 12), required=False)
@click.option("--grid", is_flag=True, help="Include padding days from neighbouring months")
@click.pass_context
@async_command
async def month(ctx, year: int | None, month: int | None, grid: bool):
    """Classes in a month (default: the current month)."""
    today = date.today()
    year = year or today.year
    month = month or today.month
    if not 1 <= year <= 9999:
        echo_error(f"Invalid year: {year}")
        ctx.exit(1)

    planner = get_planner()
    days = await planner.month(year, month)
    titles = {c.id: c.title for c in await planner.store.classes.list_all()}
    rows = _rows(days, titles, month=None if grid else month)

    click.echo()
    click.echo(click.style(date(year, month, 1).strftime("%B %Y"), bold=True))
    if not rows:
        echo_info("No classes scheduled")
        return
    click.echo(format_table(["Date", "Day", "Time", "Class"], rows))


@calendar.command()
@click.argument("day", required=False)
@async_command
async def week(day: str | None):
    """Classes in the Sunday-to-Saturday week containing DAY (default: today)."""
    target = parse_date(day, field="day") if day else date.today()
    planner = get_planner()
    days = await planner.week(target)
    titles = {c.id: c.title for c in await planner.store.classes.list_all()}
    rows = _rows(days, titles)

    first = min(days)
    click.echo()
    click.echo(click.style(f"Week of {first:%a %Y-%m-%d}", bold=True))
    if not rows:
        echo_info("No classes scheduled")
        return
    click.echo(format_table(["Date", "Day", "Time", "Class"], rows))
