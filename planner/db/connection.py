# design_capacity_planner/planner/db/connection.py
"""
Connection helpers for a serverless Postgres that may be suspended.

- connect_timeout (and optionally sslmode) are added to the URL so the first
  connection can wait for the compute to wake up
- connection/timeout failures are retried with exponential backoff
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url

from planner.config import settings

logger = logging.getLogger("planner.db.connection")

T = TypeVar("T")

RETRYABLE_PATTERNS = (
    "timeout",
    "connection",
    "econnrefused",
    "econnreset",
    "etimedout",
    "network",
    "suspended",
    "waking",
    "compute",
    "econnaborted",
    "enotfound",
)


def enhance_connection_url(
    url: str,
    connect_timeout: Optional[int] = None,
    sslmode: Optional[str] = None,
) -> str:
    """Add connect_timeout (and sslmode when missing) to PostgreSQL URLs.

    Other dialects are returned unchanged.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "postgresql":
        return url

    params = {}
    if sslmode and "sslmode" not in parsed.query:
        params["sslmode"] = sslmode
    if connect_timeout is not None:
        params["connect_timeout"] = str(connect_timeout)
    if not params:
        return url
    return parsed.update_query_dict(params).render_as_string(hide_password=False)


def config_safe_url(url: str) -> str:
    """Escape percent signs so the URL survives ConfigParser interpolation (alembic.ini options)."""
    return url.replace("%", "%%")


def calculate_retry_delay(
    attempt: int,
    initial_delay: Optional[float] = None,
    max_delay: Optional[float] = None,
) -> float:
    """Exponential backoff in seconds: initial * 2**attempt, capped at max."""
    initial = settings.DB_RETRY_INITIAL_DELAY if initial_delay is None else initial_delay
    ceiling = settings.DB_RETRY_MAX_DELAY if max_delay is None else max_delay
    return min(initial * (2 ** attempt), ceiling)


def is_retryable_error(error: BaseException) -> bool:
    message = str(error).lower()
    return any(pattern in message for pattern in RETRYABLE_PATTERNS)


def execute_with_retry(
    fn: Callable[[], T],
    max_retries: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call fn, retrying connection-type failures with backoff.

    Non-retryable errors and the final attempt's error propagate unchanged.
    """
    attempts = max(1, int(settings.DB_CONNECT_MAX_RETRIES if max_retries is None else max_retries))
    for attempt in range(attempts):
        try:
            return fn()
        except Exception as exc:
            if not is_retryable_error(exc) or attempt == attempts - 1:
                raise
            delay = calculate_retry_delay(attempt)
            logger.warning(
                "db.retry",
                extra={
                    "attempt": attempt + 1,
                    "total": attempts,
                    "delay": delay,
                    "reason": str(exc),
                },
            )
            sleep(delay)
    raise RuntimeError("unreachable")  # pragma: no cover


def ping(engine: Engine) -> bool:
    with engine.connect() as conn:
        return conn.execute(text("SELECT 1")).scalar() == 1


def wait_for_database(
    engine: Engine,
    max_retries: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Block until `SELECT 1` succeeds, retrying while the database wakes up."""
    execute_with_retry(lambda: ping(engine), max_retries=max_retries, sleep=sleep)


__all__ = [
    "RETRYABLE_PATTERNS",
    "enhance_connection_url",
    "config_safe_url",
    "calculate_retry_delay",
    "is_retryable_error",
    "execute_with_retry",
    "ping",
    "wait_for_database",
]
