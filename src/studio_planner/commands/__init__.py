"""CLI commands for studio-planner."""

from .calendar import calendar
from .classes import classes
from .init import init
from .movements import movements
from .serve import serve
from .templates import templates

__all__ = [
    "calendar",
    "classes",
    "init",
    "movements",
    "serve",
    "templates",
]
