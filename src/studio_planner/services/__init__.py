"""Scheduling and composition services."""

from .calendar import classes_on, group_by_day, month_grid, month_view, week_view, week_window
from .classes import copy_class, instantiate_from_template, save_as_template, sequence_stats
from .recurrence import (
    Occurrence,
    OccurrenceRange,
    matches,
    occurrences_in_range,
    resolve_occurrences,
)

__all__ = [
    "Occurrence",
    "OccurrenceRange",
    "classes_on",
    "copy_class",
    "group_by_day",
    "instantiate_from_template",
    "matches",
    "month_grid",
    "month_view",
    "occurrences_in_range",
    "resolve_occurrences",
    "save_as_template",
    "sequence_stats",
    "week_view",
    "week_window",
]
