# design_capacity_planner/planner/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planner.config import setup_json_logging, settings
from planner.api.routes.activity import router as activity_router
from planner.api.routes.estimation import router as estimation_router
from planner.api.routes.health import router as health_router
from planner.api.routes.plan import router as plan_router
from planner.api.routes.roadmap_items import router as roadmap_items_router
from planner.api.routes.scenarios import router as scenarios_router
from planner.api.routes.settings import router as settings_router


def create_app() -> FastAPI:
    setup_json_logging(log_level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(
        title="DESIGN CAPACITY PLANNER - API",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(scenarios_router)
    app.include_router(roadmap_items_router)
    app.include_router(settings_router)
    app.include_router(estimation_router)
    app.include_router(plan_router)
    app.include_router(activity_router)

    return app


app = create_app()
