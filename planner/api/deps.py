from __future__ import annotations

import uuid
from typing import Generator

from fastapi import HTTPException
from sqlalchemy.orm import Session

from planner.config import settings
from planner.db.connection import wait_for_database
from planner.db.session import SessionLocal, engine


def _open_session(max_retries: int) -> Generator[Session, None, None]:
    # A suspended database may need a few attempts before it accepts connections
    try:
        wait_for_database(engine, max_retries=max_retries)
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Database unavailable: {e}") from e

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_db() -> Generator[Session, None, None]:
    yield from _open_session(settings.DB_CONNECT_MAX_RETRIES)


def get_write_db() -> Generator[Session, None, None]:
    """
    Session for mutating endpoints.
    Writes get more wake-up retries than reads.
    """
    yield from _open_session(settings.DB_WRITE_MAX_RETRIES)


def is_valid_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def require_uuid(value: str) -> str:
    if not is_valid_uuid(value):
        raise HTTPException(status_code=400, detail="Invalid id format")
    return value
