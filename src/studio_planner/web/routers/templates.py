"""Class template routes."""

from fastapi import APIRouter, Body, Depends, Response

from ...models.template import Template
from ...services.planner import StudioPlanner
from .deps import get_planner, not_found

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("")
async def list_templates(planner: StudioPlanner = Depends(get_planner)):
    return [t.to_dict() for t in await planner.store.templates.list_all()]


@router.get("/{template_id}")
async def get_template(template_id: str, planner: StudioPlanner = Depends(get_planner)):
    template = await planner.store.templates.get(template_id)
    if template is None:
        raise not_found("Template")
    return template.to_dict()


@router.post("", status_code=201)
async def create_template(
    payload: dict = Body(...), planner: StudioPlanner = Depends(get_planner)
):
    data = {k: v for k, v in payload.items() if k not in ("id", "createdAt")}
    template = await planner.store.templates.create(Template.from_dict(data))
    return template.to_dict()


@router.put("/{template_id}")
async def update_template(
    template_id: str,
    payload: dict = Body(...),
    planner: StudioPlanner = Depends(get_planner),
):
    template = await planner.store.templates.update(template_id, payload)
    if template is None:
        raise not_found("Template")
    return template.to_dict()


@router.delete("/{template_id}", status_code=204)
async def delete_template(template_id: str, planner: StudioPlanner = Depends(get_planner)):
    if not await planner.store.templates.delete(template_id):
        raise not_found("Template")
    return Response(status_code=204)


@router.post("/{template_id}/instantiate", status_code=201)
async def instantiate_template(template_id: str, planner: StudioPlanner = Depends(get_planner)):
    """Create a one-off class today from a template."""
    class_def = await planner.create_from_template(template_id)
    if class_def is None:
        raise not_found("Template")
    return class_def.to_dict()
