"""
Engine and session handling for the parking-lot backend.

Request handlers get a session through ``get_db``; the reservation sweeper
and startup seeding open one with ``session_scope``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .config import settings


# env var -> (create_engine keyword, default)
_POOL_ENV = {
    "DB_POOL_SIZE": ("pool_size", 5),
    "DB_MAX_OVERFLOW": ("max_overflow", 10),
    "DB_POOL_RECYCLE_SEC": ("pool_recycle", 1800),
    "DB_POOL_TIMEOUT_SEC": ("pool_timeout", 30),
}


def pool_options() -> dict[str, int]:
    options: dict[str, int] = {}
    for env_name, (option, default) in _POOL_ENV.items():
        raw = os.getenv(env_name)
        try:
            options[option] = int(raw) if raw else default
        except ValueError:
            options[option] = default
    return options


engine = create_engine(settings.database_url, pool_pre_ping=True, **pool_options())

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=True)


def get_db() -> Iterator[Session]:
    with SessionLocal() as db:
        yield db


@contextmanager
def session_scope() -> Iterator[Session]:
    """Session for work outside a request; rolled back if the block raises."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
