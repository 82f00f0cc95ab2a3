"""Recurrence expansion: which concrete class occurrences fall in a date window.

Everything here is pure. Occurrences are derived from class definitions
on every call and never stored, so there is no cache to invalidate.
"""

import heapq
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..models.class_definition import ClassDefinition
from ..models.schedule import day_of_week, parse_date

logger = logging.getLogger(__name__)

DateLike = date | datetime | str


@dataclass(frozen=True)
class Occurrence:
    """One dated instance of a class."""

    class_definition_id: str
    start: datetime
    end: datetime

    @property
    def date(self) -> date:
        return self.start.date()

    @property
    def sort_key(self) -> tuple[datetime, str]:
        return (self.start, self.class_definition_id)

    def to_dict(self) -> dict:
        return {
            "classDefinitionId": self.class_definition_id,
            "startTime": self.start.isoformat(),
            "endTime": self.end.isoformat(),
        }


def matches(class_def: ClassDefinition, candidate: DateLike) -> bool:
    """Whether the class has an occurrence on the candidate's calendar day.

    Comparison is by day: the time of day of `candidate` is ignored.
    Monthly rules are checked exactly like weekly ones.
    """
    day = parse_date(candidate)
    anchor = class_def.schedule.anchor
    rule = class_def.schedule.recurrence

    if rule is None:
        return day == anchor.date

    if rule.end_date is not None and day > rule.end_date:
        return False
    if day_of_week(day) not in rule.days_of_week:
        return False
    if day < anchor.date:
        return False
    return True


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Each calendar day from start to end, inclusive."""
    first = parse_date(start, field="start")
    last = parse_date(end, field="end")
    for offset in range((last - first).days + 1):
        yield first + timedelta(days=offset)


def occurrences_for(
    class_def: ClassDefinition, start: DateLike, end: DateLike
) -> Iterator[Occurrence]:
    """Occurrences of one class in [start, end], in start order."""
    anchor = class_def.schedule.anchor
    class_id = class_def.id or ""
    for day in iter_days(start, end):
        if matches(class_def, day):
            occurrence_start = datetime.combine(day, anchor.time_of_day)
            yield Occurrence(
                class_definition_id=class_id,
                start=occurrence_start,
                end=occurrence_start + anchor.duration,
            )


class OccurrenceRange:
    """Restartable, lazily evaluated occurrences of many classes over a window.

    Each iteration recomputes from the definitions snapshot taken at
    construction. Output is ordered by start, then class definition id.
    """

    def __init__(
        self,
        class_defs: Iterable[ClassDefinition],
        start: DateLike,
        end: DateLike,
    ):
        self.class_defs = list(class_defs)
        self.start = parse_date(start, field="start")
        self.end = parse_date(end, field="end")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after range end {self.end}")

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def __iter__(self) -> Iterator[Occurrence]:
        logger.debug(
            "Resolving %d class definition(s) over %d day(s) from %s",
            len(self.class_defs),
            self.days,
            self.start,
        )
        per_class = [occurrences_for(c, self.start, self.end) for c in self.class_defs]
        return heapq.merge(*per_class, key=lambda o: o.sort_key)

    def __repr__(self) -> str:
        return f"OccurrenceRange({len(self.class_defs)} classes, {self.start}..{self.end})"


def occurrences_in_range(
    class_defs: Iterable[ClassDefinition], start: DateLike, end: DateLike
) -> OccurrenceRange:
    """Lazy view of all occurrences in [start, end]."""
    return OccurrenceRange(class_defs, start, end)


def resolve_occurrences(
    definitions: Iterable[ClassDefinition],
    range_start: DateLike,
    range_end: DateLike,
) -> list[Occurrence]:
    """Materialized, ordered occurrence list for calendar views."""
    occurrences = list(OccurrenceRange(definitions, range_start, range_end))
    logger.debug("Resolved %d occurrence(s)", len(occurrences))
    return occurrences
