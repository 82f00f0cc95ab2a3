"""Repository interface shared by every storage backend."""

from dataclasses import dataclass
from typing import Protocol, TypeVar

from ..models.class_definition import ClassDefinition
from ..models.movements import Movement
from ..models.template import Template

T = TypeVar("T")


class KeyedRepository(Protocol[T]):
    """Keyed entity storage.

    Updates are last-write-wins per id; there are no cross-record
    transactions.
    """

    async def get(self, entity_id: str) -> T | None:
        """Get an entity by id, or None if absent."""
        ...

    async def list_all(self) -> list[T]:
        """List every entity."""
        ...

    async def create(self, entity: T) -> T:
        """Store a new entity, assigning an id if it has none."""
        ...

    async def update(self, entity_id: str, changes: dict) -> T | None:
        """Merge a partial payload into an entity. None if the id is unknown."""
        ...

    async def delete(self, entity_id: str) -> bool:
        """Delete an entity. False if the id is unknown."""
        ...


@dataclass
class StudioStore:
    """The three repositories the planner works against."""

    movements: KeyedRepository[Movement]
    classes: KeyedRepository[ClassDefinition]
    templates: KeyedRepository[Template]
