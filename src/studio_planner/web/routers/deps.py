"""Shared router helpers."""

from fastapi import HTTPException, Request

from ...services.planner import StudioPlanner


def get_planner(request: Request) -> StudioPlanner:
    """Get the planner from app state."""
    return request.app.state.planner


def not_found(kind: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{kind} not found")
