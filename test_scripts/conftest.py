# Test bootstrap: in-memory SQLite schema + FastAPI TestClient
from __future__ import annotations

import os

# Must be set before planner.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("DB_RETRY_INITIAL_DELAY", "0")
os.environ.setdefault("DB_RETRY_MAX_DELAY", "0")

import logging

import pytest
from fastapi.testclient import TestClient

from planner.db.session import SessionLocal, engine
from planner.db.base import Base
from planner.db import models  # noqa: F401  side-effect: register all models

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def ensure_schema() -> None:
    """Create all ORM tables for tests.
    This is a test-only bootstrap; production should use Alembic migrations.
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("test-bootstrap: schema ensured")
    except Exception:
        logger.exception("test-bootstrap: schema ensure failed")
        raise


@pytest.fixture(autouse=True)
def clean_tables(ensure_schema):
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from planner.main import create_app

    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def scenario(client):
    """A fresh scenario with 2 UX and 1 content designer over a 13-week quarter."""
    resp = client.post(
        "/scenarios",
        json={
            "title": "Q1 Plan",
            "quarter": "2026-Q1",
            "ux_designers": 2,
            "content_designers": 1,
            "weeks_per_period": 13,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
