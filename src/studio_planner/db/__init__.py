"""Database layer for studio-planner."""

from .base import KeyedRepository, StudioStore
from .engine import get_db_path, init_db, seed_movements
from .memory import InMemoryRepository, memory_store
from .repositories import (
    ClassRepository,
    MovementRepository,
    TemplateRepository,
    sqlite_store,
)

__all__ = [
    "ClassRepository",
    "get_db_path",
    "InMemoryRepository",
    "init_db",
    "KeyedRepository",
    "memory_store",
    "MovementRepository",
    "seed_movements",
    "sqlite_store",
    "StudioStore",
    "TemplateRepository",
]
