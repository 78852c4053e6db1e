from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from car_finder.infra.db.config import database_url

# Lazy initialization - only create engine/session when needed
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def _engine_options(url: str) -> dict[str, Any]:
    # SQLite uses its own single-connection pools; sizing options do not apply
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": 5,  # Preferences see a handful of writes per session
        "max_overflow": 5,
        "pool_pre_ping": True,  # Verify connection health before checkout
        "pool_recycle": 3600,  # Recycle connections every hour
    }


def get_engine() -> Engine:
    """
    Get or create the database engine (lazy initialization).

    The URL comes from DATABASE_URL. Pool sizing is only applied to
    server databases.
    """
    global _engine
    if _engine is None:
        url = database_url()
        _engine = create_engine(url, future=True, **_engine_options(url))
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
