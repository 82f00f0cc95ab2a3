"""Reusable class templates."""

from dataclasses import dataclass, field
from datetime import datetime

from .errors import ValidationError, require_text
from .schedule import parse_datetime
from .sequence import Sequence


@dataclass
class Template:
    """A named (level, duration, sequence) bundle for starting new classes.

    Classes created from a template copy its sequence; later edits on
    either side do not affect the other.
    """

    name: str
    level: str
    duration_minutes: int
    sequence: Sequence = field(default_factory=Sequence)
    description: str = ""
    tags: set[str] = field(default_factory=set)
    id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("Template name is required", field="name")
        if not self.level or not self.level.strip():
            raise ValidationError("Template level is required", field="level")
        if self.duration_minutes <= 0:
            raise ValidationError("Template duration must be positive", field="duration")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "level": self.level,
            "duration": self.duration_minutes,
            "sequence": self.sequence.to_list(),
            "tags": sorted(self.tags),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: str | None = None,
        created_at: datetime | None = None,
    ) -> "Template":
        try:
            duration = int(data.get("duration", 60))
        except (TypeError, ValueError):
            raise ValidationError("Duration must be whole minutes", field="duration") from None
        if created_at is None and data.get("createdAt"):
            created_at = parse_datetime(data["createdAt"], field="createdAt")
        return cls(
            id=id if id is not None else data.get("id"),
            name=require_text(data, "name"),
            level=require_text(data, "level"),
            duration_minutes=duration,
            sequence=Sequence.from_list(data.get("sequence")),
            description=data.get("description") or "",
            tags=set(data.get("tags") or []),
            created_at=created_at,
        )

    def apply_update(self, changes: dict) -> "Template":
        merged = self.to_dict()
        merged.update({k: v for k, v in changes.items() if k not in ("id", "createdAt")})
        return Template.from_dict(merged, id=self.id, created_at=self.created_at)
