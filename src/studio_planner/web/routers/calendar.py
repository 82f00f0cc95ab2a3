"""Calendar routes: resolved occurrences for month and week views."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from ...models.errors import ValidationError
from ...services.planner import StudioPlanner
from ...services.recurrence import Occurrence
from .deps import get_planner

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


async def _with_classes(planner: StudioPlanner, occurrences: list[Occurrence]) -> dict:
    """Attach the class definitions an occurrence list refers to."""
    ids = {o.class_definition_id for o in occurrences}
    classes = {c.id: c.to_dict() for c in await planner.store.classes.list_all() if c.id in ids}
    return {"classes": classes}


def _days_payload(days: dict[date, list[Occurrence]]) -> dict:
    return {day.isoformat(): [o.to_dict() for o in items] for day, items in days.items()}


@router.get("/occurrences")
async def occurrences(start: str, end: str, planner: StudioPlanner = Depends(get_planner)):
    """Ordered occurrences in [start, end] (ISO dates, inclusive)."""
    try:
        found = await planner.occurrences(start, end)
    except ValidationError:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {
        "occurrences": [o.to_dict() for o in found],
        **await _with_classes(planner, found),
    }


@router.get("/month/{year}/{month}")
async def month(year: int, month: int, planner: StudioPlanner = Depends(get_planner)):
    """Six-week grid covering the month."""
    if not 1 <= month <= 12:
        raise HTTPException(status_code=400, detail=f"Invalid month: {month}")
    days = await planner.month(year, month)
    flat = [o for items in days.values() for o in items]
    return {"days": _days_payload(days), **await _with_classes(planner, flat)}


@router.get("/week")
async def week(
    day: str | None = Query(None, alias="date"),
    planner: StudioPlanner = Depends(get_planner),
):
    """Sunday-to-Saturday week containing `date` (default today)."""
    days = await planner.week(day or date.today())
    flat = [o for items in days.values() for o in items]
    return {"days": _days_payload(days), **await _with_classes(planner, flat)}
