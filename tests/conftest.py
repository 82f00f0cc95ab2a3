"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from studio_planner.db import memory_store
from studio_planner.models import (
    Anchor,
    ClassDefinition,
    Movement,
    PrecautionLevel,
    Recurring,
    Schedule,
    Sequence,
    Template,
)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def catalog():
    """Small catalog keyed by id: one movement per precaution level."""
    movements = [
        Movement(id="m-hundred", name="The Hundred", category="Warm-up", level="All Levels"),
        Movement(
            id="m-footwork",
            name="Footwork Series",
            category="Footwork",
            level="Beginner",
            precaution_level=PrecautionLevel.MODERATE,
        ),
        Movement(
            id="m-short-spine",
            name="Short Spine",
            category="Spinal Articulation",
            level="Advanced",
            precaution_level=PrecautionLevel.HIGH,
        ),
    ]
    return {m.id: m for m in movements}


@pytest.fixture
def one_off_class():
    """Single class on Monday 2024-03-04, 09:00-10:00."""
    return ClassDefinition(
        id="class-once",
        title="Reformer Basics",
        level="Beginner",
        schedule=Schedule(anchor=Anchor(start=datetime(2024, 3, 4, 9, 0), duration_minutes=60)),
        sequence=Sequence(["m-hundred", "m-footwork"]),
    )


@pytest.fixture
def weekly_class():
    """Mon/Wed class anchored on Monday 2024-03-04 at 18:00 for 55 minutes."""
    return ClassDefinition(
        id="class-weekly",
        title="Evening Flow",
        level="Intermediate",
        category="Regular",
        room_location="Studio A",
        max_participants=8,
        equipment={"Reformer"},
        notes="Bring socks",
        description="Flowing intermediate reformer class",
        schedule=Schedule(
            anchor=Anchor(start=datetime(2024, 3, 4, 18, 0), duration_minutes=55),
            recurrence=Recurring(days_of_week=frozenset({1, 3})),
        ),
        sequence=Sequence(["m-hundred", "m-short-spine", "m-footwork"]),
    )


@pytest.fixture
def template():
    return Template(
        id="tpl-1",
        name="Beginner Reformer",
        level="Beginner",
        duration_minutes=50,
        description="Gentle introduction",
        tags={"intro"},
        sequence=Sequence(["m-footwork", "m-hundred"]),
    )


@pytest.fixture
def store():
    """Empty in-memory store."""
    return memory_store()


@pytest.fixture
def seeded_store():
    """In-memory store preloaded with the bundled movement catalog."""
    return memory_store(seed_catalog=True)


@pytest.fixture
def class_payload():
    """Wire payload for a recurring class."""
    return {
        "title": "Morning Mat",
        "level": "All Levels",
        "startTime": "2024-03-04T07:30:00",
        "endTime": "2024-03-04T08:15:00",
        "isRecurring": True,
        "recurrencePattern": "weekly",
        "recurrenceDays": [1, 3, 5],
        "sequence": [],
    }
