"""Movement library routes."""

from fastapi import APIRouter, Body, Depends, Response

from ...models.movements import Movement
from ...services.planner import StudioPlanner
from .deps import get_planner, not_found

router = APIRouter(prefix="/api/movements", tags=["movements"])


@router.get("")
async def list_movements(
    search: str = "",
    category: str | None = None,
    planner: StudioPlanner = Depends(get_planner),
):
    """List movements, optionally filtered by search text and category."""
    movements = await planner.search_movements(search, category=category)
    return [m.to_dict() for m in movements]


@router.get("/categories")
async def list_categories(planner: StudioPlanner = Depends(get_planner)):
    return await planner.categories()


@router.get("/{movement_id}")
async def get_movement(movement_id: str, planner: StudioPlanner = Depends(get_planner)):
    movement = await planner.store.movements.get(movement_id)
    if movement is None:
        raise not_found("Movement")
    return movement.to_dict()


@router.post("", status_code=201)
async def create_movement(
    payload: dict = Body(...), planner: StudioPlanner = Depends(get_planner)
):
    """Add a user-created movement."""
    data = {k: v for k, v in payload.items() if k != "id"}
    data["isCatalogSeed"] = False
    movement = await planner.store.movements.create(Movement.from_dict(data))
    return movement.to_dict()


@router.put("/{movement_id}")
async def update_movement(
    movement_id: str,
    payload: dict = Body(...),
    planner: StudioPlanner = Depends(get_planner),
):
    movement = await planner.store.movements.update(movement_id, payload)
    if movement is None:
        raise not_found("Movement")
    return movement.to_dict()


@router.delete("/{movement_id}", status_code=204)
async def delete_movement(movement_id: str, planner: StudioPlanner = Depends(get_planner)):
    if not await planner.delete_movement(movement_id):
        raise not_found("Movement")
    return Response(status_code=204)
