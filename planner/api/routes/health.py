# design_capacity_planner/planner/api/routes/health.py

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from planner.db.connection import wait_for_database
from planner.db.session import engine

logger = logging.getLogger("planner.api.health")

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"ok": True}


@router.get("/db-health")
def db_health():
    """
    Run `SELECT 1` (with wake-up retries) and report whether the database answers.
    """
    try:
        wait_for_database(engine)
    except Exception as e:
        logger.error("db.health_failed", extra={"reason": str(e)})
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})
    return {"ok": True}
