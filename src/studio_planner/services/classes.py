"""Creating class definitions from templates and copies, and back again."""

import logging
from datetime import date, datetime, time
from uuid import uuid4

from ..models.class_definition import DEFAULT_CATEGORY, ClassDefinition
from ..models.schedule import Anchor, Schedule
from ..models.sequence import Catalog, DurationEstimator, FlatRateEstimator, Sequence, SequenceStats
from ..models.template import Template

logger = logging.getLogger(__name__)

DEFAULT_START_TIME = time(9, 0)


def new_id() -> str:
    return str(uuid4())


def _start_today(today: date | None, start_time: time | None) -> datetime:
    return datetime.combine(today or date.today(), start_time or DEFAULT_START_TIME)


def instantiate_from_template(
    template: Template,
    today: date | None = None,
    start_time: time | None = None,
    category: str = DEFAULT_CATEGORY,
) -> ClassDefinition:
    """Start a new one-off class from a template, dated today."""
    start = _start_today(today, start_time)
    class_def = ClassDefinition(
        id=new_id(),
        title=template.name,
        level=template.level,
        description=template.description,
        schedule=Schedule(anchor=Anchor(start=start, duration_minutes=template.duration_minutes)),
        sequence=template.sequence.copy(),
        category=category,
    )
    logger.debug("Instantiated class %s from template %s", class_def.id, template.id)
    return class_def


def copy_class(
    existing: ClassDefinition,
    today: date | None = None,
    start_time: time | None = None,
) -> ClassDefinition:
    """Duplicate a class as a new one-off class dated today.

    Recurrence is never copied. The copy keeps the source's time of day
    unless `start_time` is given.
    """
    start = _start_today(today, start_time or existing.start.time())
    class_def = ClassDefinition(
        id=new_id(),
        title=f"{existing.title} (Copy)",
        level=existing.level,
        schedule=Schedule(
            anchor=Anchor(start=start, duration_minutes=existing.duration_minutes)
        ),
        sequence=existing.sequence.copy(),
        category=existing.category,
        description=existing.description,
        room_location=existing.room_location,
        max_participants=existing.max_participants,
        equipment=set(existing.equipment),
        notes=existing.notes,
    )
    logger.debug("Copied class %s to %s", existing.id, class_def.id)
    return class_def


def save_as_template(
    existing: ClassDefinition,
    name: str | None = None,
    description: str | None = None,
) -> Template:
    """Snapshot a class's level, duration and sequence as a template."""
    return Template(
        id=new_id(),
        name=name or f"{existing.title} Template",
        level=existing.level,
        duration_minutes=existing.duration_minutes,
        sequence=existing.sequence.copy(),
        description=existing.description if description is None else description,
        tags=set(),
        created_at=datetime.now(),
    )


def sequence_stats(
    sequence: Sequence,
    catalog: Catalog,
    minutes_per_movement: float | None = None,
    estimator: DurationEstimator | None = None,
) -> SequenceStats:
    """Statistics for a sequence against the current catalog."""
    if estimator is None and minutes_per_movement is not None:
        estimator = FlatRateEstimator(minutes_per_movement)
    return sequence.stats(catalog, estimator=estimator)
