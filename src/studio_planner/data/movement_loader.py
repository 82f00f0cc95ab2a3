"""Movement library import from JSON."""

import json
import logging
from pathlib import Path

from ..db.base import KeyedRepository
from ..models.errors import ValidationError
from ..models.movements import Movement

logger = logging.getLogger(__name__)


def load_movements(json_path: Path) -> list[Movement]:
    """Load movements from a JSON file.

    The file holds either a list of movement payloads or an object with a
    "movements" list. Ids in the file are ignored; imported movements are
    user-created, not catalog seed.

    Returns:
        List of Movement objects loaded from JSON
    """
    with open(json_path) as f:
        data = json.load(f)

    entries = data.get("movements", []) if isinstance(data, dict) else data

    movements = []
    for entry in entries:
        try:
            payload = {**entry, "isCatalogSeed": False}
            payload.pop("id", None)
            movements.append(Movement.from_dict(payload))
        except (ValidationError, TypeError) as e:
            # Skip invalid entries but log the error
            name = entry.get("name", "unknown") if isinstance(entry, dict) else "unknown"
            logger.warning("Skipping invalid movement %s: %s", name, e)
            continue

    return movements


async def import_movements(
    json_path: Path,
    repository: KeyedRepository[Movement],
) -> int:
    """Add every valid movement in a JSON file to the library.

    Movements whose name already exists in the library are skipped.

    Returns:
        Number of movements added
    """
    existing = {m.name.lower() for m in await repository.list_all()}
    count = 0
    for movement in load_movements(json_path):
        if movement.name.lower() in existing:
            logger.info("Movement %s already in library, skipping", movement.name)
            continue
        await repository.create(movement)
        existing.add(movement.name.lower())
        count += 1
    return count
