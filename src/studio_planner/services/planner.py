"""Studio use cases on top of an injected store."""

import logging
from datetime import date

from ..db.base import StudioStore
from ..models.class_definition import ClassDefinition
from ..models.movements import Movement
from ..models.sequence import UnresolvedReference, SequenceStats, build_catalog
from ..models.template import Template
from ..settings import Settings, get_settings
from . import calendar
from .classes import copy_class, instantiate_from_template, save_as_template, sequence_stats
from .recurrence import DateLike, Occurrence, resolve_occurrences

logger = logging.getLogger(__name__)


class StudioPlanner:
    """Calendar, catalog and template operations for one studio.

    Reads take a fresh snapshot from the store on every call; unknown ids
    come back as None rather than raising.
    """

    def __init__(self, store: StudioStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or get_settings()

    # Movement catalog

    async def catalog(self) -> dict[str, Movement]:
        return build_catalog(await self.store.movements.list_all())

    async def search_movements(self, query: str = "", category: str | None = None) -> list[Movement]:
        """Movements whose name or category contains `query`."""
        term = query.strip().lower()
        results = []
        for movement in await self.store.movements.list_all():
            if category and movement.category != category:
                continue
            if term and term not in movement.name.lower() and term not in movement.category.lower():
                continue
            results.append(movement)
        return sorted(results, key=lambda m: m.name)

    async def categories(self) -> list[str]:
        return sorted({m.category for m in await self.store.movements.list_all()})

    async def delete_movement(self, movement_id: str) -> bool:
        """Delete a movement, leaving any sequence references dangling."""
        deleted = await self.store.movements.delete(movement_id)
        if not deleted:
            return False
        classes = [c for c in await self.store.classes.list_all() if movement_id in c.sequence]
        templates = [t for t in await self.store.templates.list_all() if movement_id in t.sequence]
        if classes or templates:
            logger.warning(
                "Deleted movement %s is still referenced by %d class(es) and %d template(s)",
                movement_id,
                len(classes),
                len(templates),
            )
        return True

    # Class definitions

    async def create_class(self, data: dict) -> ClassDefinition:
        """Validate a payload and store it as a new class definition."""
        payload = {k: v for k, v in data.items() if k not in ("id", "createdAt")}
        payload.setdefault("category", self.settings.default_category)
        return await self.store.classes.create(ClassDefinition.from_dict(payload))

    async def update_class(self, class_id: str, changes: dict) -> ClassDefinition | None:
        return await self.store.classes.update(class_id, changes)

    async def create_from_template(
        self, template_id: str, today: date | None = None
    ) -> ClassDefinition | None:
        template = await self.store.templates.get(template_id)
        if template is None:
            return None
        class_def = instantiate_from_template(
            template,
            today=today,
            start_time=self.settings.default_start_time,
            category=self.settings.default_category,
        )
        return await self.store.classes.create(class_def)

    async def duplicate_class(
        self, class_id: str, today: date | None = None
    ) -> ClassDefinition | None:
        existing = await self.store.classes.get(class_id)
        if existing is None:
            return None
        return await self.store.classes.create(copy_class(existing, today=today))

    async def save_class_as_template(
        self,
        class_id: str,
        name: str | None = None,
        description: str | None = None,
        tags: set[str] | None = None,
    ) -> Template | None:
        existing = await self.store.classes.get(class_id)
        if existing is None:
            return None
        template = save_as_template(existing, name=name, description=description)
        if tags:
            template.tags = set(tags)
        return await self.store.templates.create(template)

    async def class_stats(self, class_id: str) -> SequenceStats | None:
        class_def = await self.store.classes.get(class_id)
        if class_def is None:
            return None
        return sequence_stats(
            class_def.sequence,
            await self.catalog(),
            minutes_per_movement=self.settings.minutes_per_movement,
        )

    async def class_movements(
        self, class_id: str
    ) -> list[Movement | UnresolvedReference] | None:
        class_def = await self.store.classes.get(class_id)
        if class_def is None:
            return None
        return class_def.sequence.resolve(await self.catalog())

    async def available_movements(
        self, class_id: str, category: str | None = None, search: str = ""
    ) -> list[Movement] | None:
        """Catalog movements that can still be added to a class's sequence."""
        class_def = await self.store.classes.get(class_id)
        if class_def is None:
            return None
        return class_def.sequence.available(await self.catalog(), category=category, search=search)

    # Calendar

    async def occurrences(self, start: DateLike, end: DateLike) -> list[Occurrence]:
        return resolve_occurrences(await self.store.classes.list_all(), start, end)

    async def month(self, year: int, month: int) -> dict[date, list[Occurrence]]:
        return calendar.month_view(await self.store.classes.list_all(), year, month)

    async def week(self, day: DateLike) -> dict[date, list[Occurrence]]:
        return calendar.week_view(await self.store.classes.list_all(), day)

    async def classes_on(self, day: DateLike) -> list[ClassDefinition]:
        return calendar.classes_on(await self.store.classes.list_all(), day)
