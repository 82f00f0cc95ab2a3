"""SQLite data access layer for studio-planner."""

import json
import logging
from datetime import datetime
from pathlib import Path
from uuid import uuid4

import aiosqlite

from ..models.class_definition import ClassDefinition
from ..models.movements import Movement
from ..models.template import Template
from .base import StudioStore
from .engine import get_db_path

logger = logging.getLogger(__name__)


class MovementRepository:
    """Repository for the movement library."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, entity_id: str) -> Movement | None:
        """Get a movement by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM movements WHERE id = ?", (entity_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_movement(row)

    async def list_all(self) -> list[Movement]:
        """List all movements, by name."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM movements ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_movement(row) for row in rows]

    async def create(self, movement: Movement) -> Movement:
        """Add a new movement."""
        if movement.id is None:
            movement.id = str(uuid4())
        async with aiosqlite.connect(self.db_path) as db:
            await self._write(db, movement, insert=True)
            await db.commit()
        logger.info("Created movement %s (%s)", movement.id, movement.name)
        return movement

    async def update(self, entity_id: str, changes: dict) -> Movement | None:
        """Merge a partial payload into a movement."""
        existing = await self.get(entity_id)
        if existing is None:
            return None
        updated = existing.apply_update(changes)
        async with aiosqlite.connect(self.db_path) as db:
            await self._write(db, updated, insert=False)
            await db.commit()
        logger.info("Updated movement %s", entity_id)
        return updated

    async def delete(self, entity_id: str) -> bool:
        """Delete a movement. Sequences referencing it are not touched."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM movements WHERE id = ?", (entity_id,))
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted movement %s", entity_id)
        return deleted

    async def _write(self, db: aiosqlite.Connection, movement: Movement, insert: bool) -> None:
        data = movement.to_dict()
        params = (
            data["name"],
            data["category"],
            data["precautionLevel"],
            1 if movement.is_catalog_seed else 0,
            json.dumps(data),
            movement.id,
        )
        if insert:
            await db.execute(
                """
                INSERT INTO movements
                (name, category, precaution_level, is_catalog_seed, data, id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                params,
            )
        else:
            await db.execute(
                """
                UPDATE movements SET
                    name = ?, category = ?, precaution_level = ?,
                    is_catalog_seed = ?, data = ?
                WHERE id = ?
                """,
                params,
            )

    def _row_to_movement(self, row: aiosqlite.Row) -> Movement:
        """Convert a database row to a Movement."""
        data = json.loads(row["data"])
        data["isCatalogSeed"] = bool(row["is_catalog_seed"])
        return Movement.from_dict(data, id=row["id"])


class ClassRepository:
    """Repository for class definitions."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, entity_id: str) -> ClassDefinition | None:
        """Get a class definition by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM classes WHERE id = ?", (entity_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_class(row)

    async def list_all(self) -> list[ClassDefinition]:
        """List all class definitions, by anchor start."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM classes ORDER BY start_time, id")
            rows = await cursor.fetchall()
            return [self._row_to_class(row) for row in rows]

    async def create(self, class_def: ClassDefinition) -> ClassDefinition:
        """Create a new class definition."""
        if class_def.id is None:
            class_def.id = str(uuid4())
        if class_def.created_at is None:
            class_def.created_at = datetime.now()
        data = class_def.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO classes (id, title, start_time, is_recurring, data, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    class_def.id,
                    data["title"],
                    data["startTime"],
                    1 if class_def.is_recurring else 0,
                    json.dumps(data),
                    data["createdAt"],
                ),
            )
            await db.commit()
        logger.info("Created class %s (%s)", class_def.id, class_def.title)
        return class_def

    async def update(self, entity_id: str, changes: dict) -> ClassDefinition | None:
        """Merge a partial payload into a class definition."""
        existing = await self.get(entity_id)
        if existing is None:
            return None
        updated = existing.apply_update(changes)
        data = updated.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE classes SET
                    title = ?, start_time = ?, is_recurring = ?, data = ?
                WHERE id = ?
                """,
                (
                    data["title"],
                    data["startTime"],
                    1 if updated.is_recurring else 0,
                    json.dumps(data),
                    entity_id,
                ),
            )
            await db.commit()
        logger.info("Updated class %s", entity_id)
        return updated

    async def delete(self, entity_id: str) -> bool:
        """Delete a class definition."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM classes WHERE id = ?", (entity_id,))
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted class %s", entity_id)
        return deleted

    def _row_to_class(self, row: aiosqlite.Row) -> ClassDefinition:
        """Convert a database row to a ClassDefinition."""
        data = json.loads(row["data"])
        created_at = datetime.fromisoformat(row["created_at"]) if row["created_at"] else None
        return ClassDefinition.from_dict(data, id=row["id"], created_at=created_at)


class TemplateRepository:
    """Repository for class templates."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, entity_id: str) -> Template | None:
        """Get a template by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM templates WHERE id = ?", (entity_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_template(row)

    async def list_all(self) -> list[Template]:
        """List all templates, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM templates ORDER BY created_at DESC, name")
            rows = await cursor.fetchall()
            return [self._row_to_template(row) for row in rows]

    async def create(self, template: Template) -> Template:
        """Create a new template."""
        if template.id is None:
            template.id = str(uuid4())
        if template.created_at is None:
            template.created_at = datetime.now()
        data = template.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "INSERT INTO templates (id, name, data, created_at) VALUES (?, ?, ?, ?)",
                (template.id, data["name"], json.dumps(data), data["createdAt"]),
            )
            await db.commit()
        logger.info("Created template %s (%s)", template.id, template.name)
        return template

    async def update(self, entity_id: str, changes: dict) -> Template | None:
        """Merge a partial payload into a template."""
        existing = await self.get(entity_id)
        if existing is None:
            return None
        updated = existing.apply_update(changes)
        data = updated.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "UPDATE templates SET name = ?, data = ? WHERE id = ?",
                (data["name"], json.dumps(data), entity_id),
            )
            await db.commit()
        logger.info("Updated template %s", entity_id)
        return updated

    async def delete(self, entity_id: str) -> bool:
        """Delete a template."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM templates WHERE id = ?", (entity_id,))
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted template %s", entity_id)
        return deleted

    def _row_to_template(self, row: aiosqlite.Row) -> Template:
        """Convert a database row to a Template."""
        data = json.loads(row["data"])
        created_at = datetime.fromisoformat(row["created_at"]) if row["created_at"] else None
        return Template.from_dict(data, id=row["id"], created_at=created_at)


def sqlite_store(db_path: Path | None = None) -> StudioStore:
    """Store backed by the SQLite database at `db_path`."""
    return StudioStore(
        movements=MovementRepository(db_path),
        classes=ClassRepository(db_path),
        templates=TemplateRepository(db_path),
    )
