"""Movement definitions and the bundled reformer repertoire."""

from dataclasses import dataclass, field, replace
from enum import Enum

from .errors import ValidationError, require_text


class PrecautionLevel(str, Enum):
    """How much care a movement needs with injured or new clients."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

    @classmethod
    def parse(cls, value: "str | PrecautionLevel") -> "PrecautionLevel":
        """Parse a level, accepting any casing ("high", "High")."""
        if isinstance(value, cls):
            return value
        for level in cls:
            if isinstance(value, str) and level.value.lower() == value.strip().lower():
                return level
        raise ValidationError(
            f"Unknown precaution level: {value!r}", field="precautionLevel"
        )


# Wire keys holding ordered string lists / unordered string sets
_LIST_FIELDS = {
    "instructions": "instructions",
    "precautions": "precautions",
    "benefits": "benefits",
    "contraindications": "contraindications",
    "modifications": "modifications",
}
_SET_FIELDS = {
    "tags": "tags",
    "equipment": "equipment",
    "muscleGroups": "muscle_groups",
}


@dataclass
class Movement:
    """An exercise in the studio's movement library."""

    name: str
    category: str
    level: str
    precaution_level: PrecautionLevel = PrecautionLevel.LOW
    description: str = ""
    instructions: list[str] = field(default_factory=list)
    precautions: list[str] = field(default_factory=list)
    duration: str | None = None  # Free-form label, e.g. "2-3 minutes"
    thumbnail_url: str | None = None
    tags: set[str] = field(default_factory=set)
    benefits: list[str] = field(default_factory=list)
    contraindications: list[str] = field(default_factory=list)
    modifications: list[str] = field(default_factory=list)
    equipment: set[str] = field(default_factory=set)
    muscle_groups: set[str] = field(default_factory=set)
    breathing_pattern: str | None = None
    is_catalog_seed: bool = False  # Bundled reference data vs. user-created
    id: str | None = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("Movement name is required", field="name")
        if not self.category or not self.category.strip():
            raise ValidationError("Movement category is required", field="category")
        if not self.level or not self.level.strip():
            raise ValidationError("Movement level is required", field="level")
        self.precaution_level = PrecautionLevel.parse(self.precaution_level)

    @property
    def is_high_risk(self) -> bool:
        return self.precaution_level == PrecautionLevel.HIGH

    def to_dict(self) -> dict:
        """Convert to the JSON wire representation."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "level": self.level,
            "description": self.description,
            "instructions": list(self.instructions),
            "precautions": list(self.precautions),
            "precautionLevel": self.precaution_level.value,
            "duration": self.duration,
            "thumbnailUrl": self.thumbnail_url,
            "tags": sorted(self.tags),
            "benefits": list(self.benefits),
            "contraindications": list(self.contraindications),
            "modifications": list(self.modifications),
            "equipment": sorted(self.equipment),
            "muscleGroups": sorted(self.muscle_groups),
            "breathingPattern": self.breathing_pattern,
            "isCatalogSeed": self.is_catalog_seed,
        }

    @classmethod
    def from_dict(cls, data: dict, id: str | None = None) -> "Movement":
        """Create from a JSON payload."""
        kwargs = {}
        for key, attr in _LIST_FIELDS.items():
            kwargs[attr] = list(data.get(key) or [])
        for key, attr in _SET_FIELDS.items():
            kwargs[attr] = set(data.get(key) or [])
        return cls(
            id=id if id is not None else data.get("id"),
            name=require_text(data, "name"),
            category=require_text(data, "category"),
            level=require_text(data, "level"),
            precaution_level=PrecautionLevel.parse(data.get("precautionLevel") or "Low"),
            description=data.get("description") or "",
            duration=data.get("duration") or None,
            thumbnail_url=data.get("thumbnailUrl") or None,
            breathing_pattern=data.get("breathingPattern") or None,
            is_catalog_seed=bool(data.get("isCatalogSeed", False)),
            **kwargs,
        )

    def apply_update(self, changes: dict) -> "Movement":
        """Return a copy with a partial payload merged in."""
        merged = self.to_dict()
        merged.update({k: v for k, v in changes.items() if k not in ("id", "isCatalogSeed")})
        updated = Movement.from_dict(merged, id=self.id)
        return replace(updated, is_catalog_seed=self.is_catalog_seed)


# Bundled reformer repertoire, loaded into a fresh catalog as seed data
SEED_MOVEMENTS: list[Movement] = [
    Movement(
        name="The Hundred",
        category="Warm-up",
        level="All Levels",
        description="Warm-up that raises circulation and prepares the body for movement.",
        instructions=[
            "Lie supine with knees drawn into chest",
            "Lift head and shoulders, extending legs to 45 degrees",
            "Pump arms up and down",
            "Breathe in for 5 pumps, out for 5 pumps, repeat 10 times",
        ],
        precautions=[
            "Keep lower back pressed into carriage",
            "Keep knees bent if lower back lifts",
            "Rest head down if neck strain occurs",
        ],
        precaution_level=PrecautionLevel.LOW,
        duration="2-3 minutes",
        breathing_pattern="Inhale 5 counts, exhale 5 counts",
        muscle_groups={"abdominals", "hip flexors"},
        equipment={"reformer"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Footwork Series",
        category="Lower Body",
        level="Beginner",
        description="Foundational leg strengthening performed with feet on the footbar.",
        instructions=[
            "Lie supine with feet on footbar in parallel",
            "Press out to straight legs, keeping a neutral pelvis",
            "Return with control, knees tracking over toes",
            "Repeat in parallel, pilates V and wide second",
        ],
        precautions=[
            "Keep knees aligned over toes",
            "Avoid locking knees at extension",
        ],
        precaution_level=PrecautionLevel.LOW,
        duration="5-8 minutes",
        muscle_groups={"quadriceps", "hamstrings", "glutes", "calves"},
        equipment={"reformer"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Single Leg Stretch",
        category="Core",
        level="Beginner",
        description="Core exercise that challenges stability while each leg works independently.",
        instructions=[
            "Lie supine, head and shoulders lifted",
            "Draw both knees in, hands on shins",
            "Extend one leg while pulling the other knee closer",
            "Switch legs in a smooth, controlled motion",
        ],
        precautions=[
            "Avoid with acute lower back pain",
            "Keep the pelvis stable and neutral",
        ],
        precaution_level=PrecautionLevel.MODERATE,
        duration="3-5 minutes",
        muscle_groups={"abdominals"},
        equipment={"mat"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Short Spine",
        category="Full Body",
        level="Intermediate",
        description="Spinal articulation combined with leg and core work.",
        instructions=[
            "Lie supine with legs in straps, arms by sides",
            "Roll the spine up vertebra by vertebra, legs overhead",
            "Open legs to shoulder width and bend knees",
            "Roll down with control, extending legs",
        ],
        precautions=[
            "Contraindicated for neck injuries",
            "Do not roll onto the neck",
        ],
        contraindications=["Neck injury", "Osteoporosis"],
        precaution_level=PrecautionLevel.HIGH,
        duration="3-4 minutes",
        muscle_groups={"abdominals", "hamstrings"},
        equipment={"reformer", "straps"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Elephant",
        category="Full Body",
        level="Intermediate",
        description="Standing exercise that strengthens the whole body and challenges balance.",
        instructions=[
            "Stand on carriage facing footbar, hands on footbar",
            "Round the spine into a C-curve",
            "Press the carriage out by straightening the legs",
            "Return with control, keeping the curve",
        ],
        precautions=[
            "Keep wrists under shoulders",
            "Avoid with wrist pain",
        ],
        precaution_level=PrecautionLevel.MODERATE,
        duration="2-3 minutes",
        muscle_groups={"abdominals", "hamstrings", "shoulders"},
        equipment={"reformer"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Long Stretch Series",
        category="Full Body",
        level="Advanced",
        description="Plank-based series demanding significant core strength.",
        instructions=[
            "Start in plank on the carriage, hands on footbar",
            "Press out keeping a straight line from head to heels",
            "Return with control",
            "Progress to up-stretch and down-stretch",
        ],
        precautions=[
            "Do not let hips sag or pike",
            "Avoid with wrist or shoulder pain",
        ],
        precaution_level=PrecautionLevel.HIGH,
        duration="4-6 minutes",
        muscle_groups={"abdominals", "shoulders", "chest"},
        equipment={"reformer"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Stomach Massage",
        category="Core",
        level="Intermediate",
        description="Seated exercise for core strength and spinal mobility.",
        instructions=[
            "Sit upright on the carriage, feet on footbar",
            "Round forward, hands behind thighs",
            "Press legs straight while lifting the spine tall",
            "Return with control",
        ],
        precautions=["Do not force spinal flexion"],
        precaution_level=PrecautionLevel.MODERATE,
        duration="4-5 minutes",
        muscle_groups={"abdominals", "calves"},
        equipment={"reformer"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Coordination",
        category="Full Body",
        level="Advanced",
        description="Arm and leg work with precise timing and control.",
        instructions=[
            "Lie supine holding straps, knees into chest",
            "Extend arms and legs together",
            "Open and close the legs",
            "Return arms and legs with control",
        ],
        precautions=[
            "Keep the lower back stable",
            "Do not hold the breath",
        ],
        precaution_level=PrecautionLevel.HIGH,
        duration="3-4 minutes",
        muscle_groups={"abdominals", "triceps"},
        equipment={"reformer", "straps"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Double Leg Stretch",
        category="Core",
        level="Intermediate",
        description="Core exercise with arms and legs moving together.",
        instructions=[
            "Lie supine, head lifted, knees into chest",
            "Extend arms overhead and legs to 45 degrees",
            "Circle arms around back to the start",
        ],
        precautions=[
            "Keep the lower back down",
            "Bend knees if the back lifts",
        ],
        precaution_level=PrecautionLevel.MODERATE,
        duration="2-3 minutes",
        muscle_groups={"abdominals"},
        equipment={"mat"},
        is_catalog_seed=True,
    ),
    Movement(
        name="Rowing Series",
        category="Upper Body",
        level="Intermediate",
        description="Seated series that strengthens the back and improves posture.",
        instructions=[
            "Sit tall holding straps, arms extended",
            "Draw elbows back, squeezing shoulder blades",
            "Work from chest, from above and hug-a-tree",
        ],
        precautions=[
            "Do not round the shoulders forward",
            "Reduce range with shoulder impingement",
        ],
        precaution_level=PrecautionLevel.LOW,
        duration="5-7 minutes",
        muscle_groups={"upper back", "shoulders", "biceps"},
        equipment={"reformer", "straps"},
        is_catalog_seed=True,
    ),
]
