"""In-memory storage, for tests and throwaway sessions."""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Generic, TypeVar
from uuid import uuid4

from ..models.class_definition import ClassDefinition
from ..models.movements import SEED_MOVEMENTS, Movement
from ..models.template import Template
from .base import StudioStore

logger = logging.getLogger(__name__)

T = TypeVar("T", Movement, ClassDefinition, Template)


class InMemoryRepository(Generic[T]):
    """Dict-backed repository.

    Entities are stored as their wire dicts, so callers never share
    mutable state with the store.
    """

    def __init__(self, kind: str, loader: Callable[[dict], T]):
        self.kind = kind
        self._loader = loader
        self._rows: dict[str, dict] = {}

    async def get(self, entity_id: str) -> T | None:
        row = self._rows.get(entity_id)
        if row is None:
            return None
        return self._loader(row)

    async def list_all(self) -> list[T]:
        return [self._loader(row) for row in self._rows.values()]

    async def create(self, entity: T) -> T:
        if entity.id is None:
            entity.id = str(uuid4())
        if hasattr(entity, "created_at") and entity.created_at is None:
            entity.created_at = datetime.now()
        self._rows[entity.id] = entity.to_dict()
        logger.info("Created %s %s", self.kind, entity.id)
        return self._loader(self._rows[entity.id])

    async def update(self, entity_id: str, changes: dict) -> T | None:
        existing = await self.get(entity_id)
        if existing is None:
            return None
        updated = existing.apply_update(changes)
        self._rows[entity_id] = updated.to_dict()
        logger.info("Updated %s %s", self.kind, entity_id)
        return updated

    async def delete(self, entity_id: str) -> bool:
        if self._rows.pop(entity_id, None) is None:
            return False
        logger.info("Deleted %s %s", self.kind, entity_id)
        return True

    def seed(self, entities: Iterable[T]) -> None:
        """Load entities synchronously (test setup, seed data)."""
        for entity in entities:
            if entity.id is None:
                entity.id = str(uuid4())
            self._rows[entity.id] = entity.to_dict()


def memory_store(seed_catalog: bool = False) -> StudioStore:
    """Fresh in-memory store, optionally preloaded with the seed catalog."""
    movements = InMemoryRepository("movement", Movement.from_dict)
    if seed_catalog:
        movements.seed(Movement.from_dict(m.to_dict()) for m in SEED_MOVEMENTS)
    return StudioStore(
        movements=movements,
        classes=InMemoryRepository("class", ClassDefinition.from_dict),
        templates=InMemoryRepository("template", Template.from_dict),
    )
