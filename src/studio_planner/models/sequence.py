"""Ordered movement sequences and the statistics derived from them."""

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from .movements import Movement

logger = logging.getLogger(__name__)

# Planning heuristic, not a scheduling guarantee: the catalog's duration
# labels ("2-3 minutes") are free text and are not parsed.
DEFAULT_MINUTES_PER_MOVEMENT = 4.5

Catalog = Mapping[str, Movement]


class IndexOutOfRange(IndexError):
    """Raised when a sequence position does not exist."""


@dataclass(frozen=True)
class UnresolvedReference:
    """Placeholder for a sequence entry whose movement is no longer in the catalog."""

    movement_id: str

    def to_dict(self) -> dict:
        return {"id": self.movement_id, "unresolved": True}


@dataclass(frozen=True)
class SequenceStats:
    """Display and planning numbers for a sequence."""

    movement_count: int
    estimated_minutes: int
    high_risk_count: int

    def to_dict(self) -> dict:
        return {
            "movementCount": self.movement_count,
            "estimatedMinutes": self.estimated_minutes,
            "highRiskCount": self.high_risk_count,
        }


class DurationEstimator(Protocol):
    """Strategy that estimates how long a sequence takes to teach."""

    def __call__(self, movement_ids: list[str], catalog: Catalog) -> int: ...


@dataclass(frozen=True)
class FlatRateEstimator:
    """Fixed minutes per movement, rounded up to whole minutes."""

    minutes_per_movement: float = DEFAULT_MINUTES_PER_MOVEMENT

    def __call__(self, movement_ids: list[str], catalog: Catalog) -> int:
        return math.ceil(len(movement_ids) * self.minutes_per_movement)


def build_catalog(movements: Iterable[Movement]) -> dict[str, Movement]:
    """Index movements by id for sequence resolution."""
    return {m.id: m for m in movements if m.id is not None}


@dataclass
class Sequence:
    """An ordered list of movement ids; each id appears at most once.

    Ids are not checked against the catalog. Entries whose movement has
    been deleted resolve to an UnresolvedReference instead.
    """

    movement_ids: list[str] = field(default_factory=list)

    def __post_init__(self):
        # Drop repeats, keeping first position
        self.movement_ids = list(dict.fromkeys(self.movement_ids))

    def __len__(self) -> int:
        return len(self.movement_ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.movement_ids)

    def __contains__(self, movement_id: object) -> bool:
        return movement_id in self.movement_ids

    def append(self, movement_id: str) -> None:
        """Add a movement at the end. No-op if it is already in the sequence."""
        if movement_id in self.movement_ids:
            return
        self.movement_ids.append(movement_id)

    def remove_at(self, index: int) -> str:
        """Remove and return the entry at `index`, shifting later entries left."""
        self._check_index(index)
        return self.movement_ids.pop(index)

    def clear(self) -> None:
        self.movement_ids.clear()

    def reorder(self, from_index: int, to_index: int) -> None:
        """Move one entry, keeping the relative order of all others."""
        self._check_index(from_index)
        self._check_index(to_index)
        movement_id = self.movement_ids.pop(from_index)
        self.movement_ids.insert(to_index, movement_id)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.movement_ids):
            raise IndexOutOfRange(
                f"Index {index} out of range for sequence of {len(self.movement_ids)}"
            )

    def resolve(self, catalog: Catalog) -> list[Movement | UnresolvedReference]:
        """Map each id through the catalog, keeping order."""
        resolved: list[Movement | UnresolvedReference] = []
        for movement_id in self.movement_ids:
            movement = catalog.get(movement_id)
            if movement is None:
                logger.warning("Sequence references unknown movement %s", movement_id)
                resolved.append(UnresolvedReference(movement_id))
            else:
                resolved.append(movement)
        return resolved

    def stats(
        self,
        catalog: Catalog,
        estimator: DurationEstimator | None = None,
    ) -> SequenceStats:
        """Compute count, estimated minutes and high-risk tally."""
        estimator = estimator or FlatRateEstimator()
        high_risk = sum(
            1
            for movement_id in self.movement_ids
            if movement_id in catalog and catalog[movement_id].is_high_risk
        )
        return SequenceStats(
            movement_count=len(self.movement_ids),
            estimated_minutes=estimator(list(self.movement_ids), catalog),
            high_risk_count=high_risk,
        )

    def available(
        self,
        catalog: Catalog,
        category: str | None = None,
        search: str = "",
    ) -> list[Movement]:
        """Catalog movements not yet in the sequence, for the movement picker."""
        term = search.strip().lower()
        result = []
        for movement in catalog.values():
            if movement.id in self.movement_ids:
                continue
            if category and movement.category != category:
                continue
            if term and term not in movement.name.lower() and term not in movement.category.lower():
                continue
            result.append(movement)
        return sorted(result, key=lambda m: m.name)

    def copy(self) -> "Sequence":
        return Sequence(list(self.movement_ids))

    def to_list(self) -> list[str]:
        return list(self.movement_ids)

    @classmethod
    def from_list(cls, ids: Iterable[str] | None) -> "Sequence":
        return cls([str(i) for i in ids or []])
