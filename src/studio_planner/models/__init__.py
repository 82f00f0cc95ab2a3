"""Data models for studio-planner."""

from .class_definition import ClassDefinition
from .errors import ValidationError
from .movements import Movement, PrecautionLevel
from .schedule import Anchor, RecurrencePattern, Recurring, Schedule
from .sequence import IndexOutOfRange, Sequence, SequenceStats, UnresolvedReference
from .template import Template

__all__ = [
    "Anchor",
    "ClassDefinition",
    "IndexOutOfRange",
    "Movement",
    "PrecautionLevel",
    "RecurrencePattern",
    "Recurring",
    "Schedule",
    "Sequence",
    "SequenceStats",
    "Template",
    "UnresolvedReference",
    "ValidationError",
]
