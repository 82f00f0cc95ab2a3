"""FastAPI application for the studio-planner JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..db.base import StudioStore
from ..db.engine import get_db_path, init_db, seed_movements
from ..db.repositories import sqlite_store
from ..models.errors import ValidationError
from ..services.planner import StudioPlanner
from ..settings import Settings, get_settings
from .routers import calendar, classes, movements, templates

logger = logging.getLogger(__name__)


def create_app(store: StudioStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without a store, the app opens the SQLite database from settings,
    creating and seeding it on first start.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        if store is None:
            db_path = get_db_path(settings.data_dir)
            if not db_path.exists():
                await init_db(db_path)
                await seed_movements(db_path)
            app.state.planner = StudioPlanner(sqlite_store(db_path), settings)
        yield

    app = FastAPI(
        title="studio-planner",
        description="Class calendar and movement sequencing for Pilates studios",
        version="0.1.0",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.planner = StudioPlanner(store, settings)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    app.include_router(movements.router)
    app.include_router(classes.router)
    app.include_router(templates.router)
    app.include_router(calendar.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
