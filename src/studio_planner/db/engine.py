"""Database engine setup and initialization."""

import json
import logging
from pathlib import Path
from uuid import uuid4

import aiosqlite

from ..settings import get_settings

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema.

    Entities are stored as their JSON wire payload in `data`; the other
    columns are copies used for ordering and lookups.
    """
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Movement library
        await db.execute("""
            CREATE TABLE IF NOT EXISTS movements (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                category TEXT NOT NULL,
                precaution_level TEXT NOT NULL,
                is_catalog_seed INTEGER DEFAULT 0,
                data TEXT NOT NULL
            )
        """)

        # Class definitions (one-off and recurring)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS classes (
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL,
                start_time TEXT NOT NULL,
                is_recurring INTEGER DEFAULT 0,
                data TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Class templates
        await db.execute("""
            CREATE TABLE IF NOT EXISTS templates (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                data TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_movements_category
            ON movements(category)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_classes_start_time
            ON classes(start_time)
        """)

        await db.commit()
    logger.info("Database schema ready at %s", db_path)


async def seed_movements(db_path: Path | None = None) -> int:
    """Seed the movement library with the bundled repertoire.

    Seed movements already present (matched by name) are left alone.

    Returns:
        Number of movements inserted
    """
    from ..models.movements import SEED_MOVEMENTS

    if db_path is None:
        db_path = get_db_path()

    count = 0
    async with aiosqlite.connect(db_path) as db:
        for movement in SEED_MOVEMENTS:
            cursor = await db.execute(
                "SELECT 1 FROM movements WHERE name = ? AND is_catalog_seed = 1",
                (movement.name,),
            )
            if await cursor.fetchone():
                continue
            data = movement.to_dict()
            data["id"] = str(uuid4())
            await db.execute(
                """
                INSERT INTO movements
                (id, name, category, precaution_level, is_catalog_seed, data)
                VALUES (?, ?, ?, ?, 1, ?)
                """,
                (
                    data["id"],
                    data["name"],
                    data["category"],
                    data["precautionLevel"],
                    json.dumps(data),
                ),
            )
            count += 1

        await db.commit()

    logger.info("Seeded %d movement(s)", count)
    return count
