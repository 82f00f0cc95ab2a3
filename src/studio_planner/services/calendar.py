"""Calendar windows and per-day grouping for month and week views."""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date, timedelta

from ..models.class_definition import ClassDefinition
from ..models.errors import ValidationError
from ..models.schedule import day_of_week, parse_date
from .recurrence import DateLike, Occurrence, matches, resolve_occurrences

MONTH_GRID_DAYS = 42  # Six full weeks
WEEK_DAYS = 7


def start_of_week(day: date) -> date:
    """The Sunday on or before `day`."""
    return day - timedelta(days=day_of_week(day))


def month_grid(year: int, month: int) -> tuple[date, date]:
    """First and last day of the six-week grid covering a month.

    The grid starts on the Sunday on or before the 1st and is padded with
    days from the neighbouring months.
    """
    try:
        start = start_of_week(date(year, month, 1))
        return start, start + timedelta(days=MONTH_GRID_DAYS - 1)
    except (ValueError, OverflowError):
        raise ValidationError(
            f"No calendar grid for month {month} of year {year}", field="month"
        ) from None


def week_window(day: DateLike) -> tuple[date, date]:
    """Sunday-to-Saturday week containing `day`."""
    target = parse_date(day)
    try:
        start = start_of_week(target)
        return start, start + timedelta(days=WEEK_DAYS - 1)
    except OverflowError:
        raise ValidationError(f"No calendar week for {target}", field="date") from None


def group_by_day(
    occurrences: Iterable[Occurrence],
    start: date | None = None,
    end: date | None = None,
) -> dict[date, list[Occurrence]]:
    """Bucket occurrences by calendar day, keeping their order.

    With `start` and `end`, every day of the window gets a key, empty or not.
    """
    grouped: dict[date, list[Occurrence]] = defaultdict(list)
    if start is not None and end is not None:
        for offset in range((end - start).days + 1):
            grouped[start + timedelta(days=offset)] = []
    for occurrence in occurrences:
        grouped[occurrence.date].append(occurrence)
    return dict(grouped)


def month_view(
    definitions: Iterable[ClassDefinition], year: int, month: int
) -> dict[date, list[Occurrence]]:
    """Occurrences for every cell of a month grid."""
    start, end = month_grid(year, month)
    return group_by_day(resolve_occurrences(definitions, start, end), start, end)


def week_view(
    definitions: Iterable[ClassDefinition], day: DateLike
) -> dict[date, list[Occurrence]]:
    """Occurrences for each day of the week containing `day`."""
    start, end = week_window(day)
    return group_by_day(resolve_occurrences(definitions, start, end), start, end)


def classes_on(
    definitions: Iterable[ClassDefinition], day: DateLike
) -> list[ClassDefinition]:
    """Class definitions with an occurrence on `day`, by start time then id."""
    target = parse_date(day)
    found = [c for c in definitions if matches(c, target)]
    return sorted(found, key=lambda c: (c.start.time(), c.id or ""))
