# design_capacity_planner/planner/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from planner.config import settings  # expects DATABASE_URL
from planner.db.connection import enhance_connection_url


def _engine_kwargs(url: str) -> dict:
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live per connection; share one across sessions
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {"pool_pre_ping": True}


DATABASE_URL = enhance_connection_url(
    settings.DATABASE_URL,
    connect_timeout=settings.DB_CONNECT_TIMEOUT,
    sslmode=settings.DB_SSLMODE,
)

engine = create_engine(DATABASE_URL, future=True, **_engine_kwargs(DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
