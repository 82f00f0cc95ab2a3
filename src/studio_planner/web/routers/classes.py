"""Class definition routes."""

from fastapi import APIRouter, Body, Depends, Response

from ...models.movements import Movement
from ...services.planner import StudioPlanner
from .deps import get_planner, not_found

router = APIRouter(prefix="/api/classes", tags=["classes"])


@router.get("")
async def list_classes(planner: StudioPlanner = Depends(get_planner)):
    return [c.to_dict() for c in await planner.store.classes.list_all()]


@router.get("/date/{day}")
async def classes_on_date(day: str, planner: StudioPlanner = Depends(get_planner)):
    """Classes with an occurrence on the given date, recurring ones included."""
    return [c.to_dict() for c in await planner.classes_on(day)]


@router.get("/{class_id}")
async def get_class(class_id: str, planner: StudioPlanner = Depends(get_planner)):
    class_def = await planner.store.classes.get(class_id)
    if class_def is None:
        raise not_found("Class")
    return class_def.to_dict()


@router.post("", status_code=201)
async def create_class(payload: dict = Body(...), planner: StudioPlanner = Depends(get_planner)):
    class_def = await planner.create_class(payload)
    return class_def.to_dict()


@router.put("/{class_id}")
async def update_class(
    class_id: str,
    payload: dict = Body(...),
    planner: StudioPlanner = Depends(get_planner),
):
    class_def = await planner.update_class(class_id, payload)
    if class_def is None:
        raise not_found("Class")
    return class_def.to_dict()


@router.delete("/{class_id}", status_code=204)
async def delete_class(class_id: str, planner: StudioPlanner = Depends(get_planner)):
    if not await planner.store.classes.delete(class_id):
        raise not_found("Class")
    return Response(status_code=204)


@router.post("/{class_id}/copy", status_code=201)
async def copy_class(class_id: str, planner: StudioPlanner = Depends(get_planner)):
    """Duplicate a class as a one-off class today."""
    class_def = await planner.duplicate_class(class_id)
    if class_def is None:
        raise not_found("Class")
    return class_def.to_dict()


@router.post("/{class_id}/template", status_code=201)
async def save_as_template(
    class_id: str,
    payload: dict | None = Body(None),
    planner: StudioPlanner = Depends(get_planner),
):
    """Save a class's level, duration and sequence as a template."""
    payload = payload or {}
    template = await planner.save_class_as_template(
        class_id,
        name=payload.get("name"),
        description=payload.get("description"),
        tags=set(payload.get("tags") or []),
    )
    if template is None:
        raise not_found("Class")
    return template.to_dict()


@router.get("/{class_id}/stats")
async def class_stats(class_id: str, planner: StudioPlanner = Depends(get_planner)):
    stats = await planner.class_stats(class_id)
    if stats is None:
        raise not_found("Class")
    return stats.to_dict()


@router.get("/{class_id}/movements")
async def class_movements(class_id: str, planner: StudioPlanner = Depends(get_planner)):
    """The class sequence with movements resolved; deleted ones are flagged."""
    resolved = await planner.class_movements(class_id)
    if resolved is None:
        raise not_found("Class")
    return [
        {**entry.to_dict(), "unresolved": False} if isinstance(entry, Movement) else entry.to_dict()
        for entry in resolved
    ]


@router.get("/{class_id}/available-movements")
async def available_movements(
    class_id: str,
    search: str = "",
    category: str | None = None,
    planner: StudioPlanner = Depends(get_planner),
):
    movements = await planner.available_movements(class_id, category=category, search=search)
    if movements is None:
        raise not_found("Class")
    return [m.to_dict() for m in movements]
