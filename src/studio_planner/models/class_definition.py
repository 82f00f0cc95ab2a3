"""Class definitions: one-off or recurring classes with a movement sequence."""

from dataclasses import dataclass, field
from datetime import datetime

from .errors import ValidationError, require_text
from .schedule import Schedule, parse_datetime
from .sequence import Sequence

DEFAULT_CATEGORY = "Regular"


@dataclass
class ClassDefinition:
    """A scheduled class and the sequence it teaches."""

    title: str
    level: str
    schedule: Schedule
    sequence: Sequence = field(default_factory=Sequence)
    category: str = DEFAULT_CATEGORY
    description: str = ""
    room_location: str | None = None
    max_participants: int | None = None
    equipment: set[str] = field(default_factory=set)
    notes: str = ""
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValidationError("Class title is required", field="title")
        if not self.level or not self.level.strip():
            raise ValidationError("Class level is required", field="level")
        if not self.category:
            self.category = DEFAULT_CATEGORY
        if self.max_participants is not None and self.max_participants < 1:
            raise ValidationError(
                "Max participants must be at least 1", field="maxParticipants"
            )

    @property
    def is_recurring(self) -> bool:
        return self.schedule.is_recurring

    @property
    def start(self) -> datetime:
        return self.schedule.anchor.start

    @property
    def duration_minutes(self) -> int:
        return self.schedule.anchor.duration_minutes

    def to_dict(self) -> dict:
        """Convert to the JSON wire representation."""
        return {
            "id": self.id,
            "title": self.title,
            "level": self.level,
            "category": self.category,
            "description": self.description,
            "roomLocation": self.room_location,
            "maxParticipants": self.max_participants,
            "equipment": sorted(self.equipment),
            "notes": self.notes,
            "sequence": self.sequence.to_list(),
            **self.schedule.to_dict(),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
    ) -> "ClassDefinition":
        """Create from a JSON payload."""
        max_participants = data.get("maxParticipants")
        if max_participants is not None:
            try:
                max_participants = int(max_participants)
            except (TypeError, ValueError):
                raise ValidationError(
                    "Max participants must be a number", field="maxParticipants"
                ) from None
        if created_at is None and data.get("createdAt"):
            created_at = parse_datetime(data["createdAt"], field="createdAt")
        return cls(
            id=id if id is not None else data.get("id"),
            title=require_text(data, "title"),
            level=require_text(data, "level"),
            schedule=Schedule.from_dict(data),
            sequence=Sequence.from_list(data.get("sequence")),
            category=data.get("category") or DEFAULT_CATEGORY,
            description=data.get("description") or "",
            room_location=data.get("roomLocation") or None,
            max_participants=max_participants,
            equipment=set(data.get("equipment") or []),
            notes=data.get("notes") or "",
            created_at=created_at,
        )

    def apply_update(self, changes: dict) -> "ClassDefinition":
        """Return a copy with a partial payload merged in and re-validated.

        Changing the start or duration alone keeps the other one, so a
        class moved to a new slot keeps its length.
        """
        merged = self.to_dict()
        if "endTime" not in changes and changes.keys() & {"startTime", "duration", "date"}:
            merged.pop("endTime")
        if "date" in changes and "startTime" not in changes:
            merged["startTime"] = self.start.strftime("%H:%M")
        merged.update({k: v for k, v in changes.items() if k not in ("id", "createdAt")})
        return ClassDefinition.from_dict(merged, id=self.id, created_at=self.created_at)
