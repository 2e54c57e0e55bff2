"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations (see alembic.ini). Engine and
session factory are created lazily on first use (get_db) so import
does not trigger Settings loading.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings
from app.domain.exceptions import SqlNotConfiguredException

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _engine_kwargs(database_url: str) -> dict[str, Any]:
    """Pool and driver options for the URL's backend."""
    settings = get_settings()
    kwargs: dict[str, Any] = {"echo": settings.database_echo, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        return kwargs
    kwargs["pool_size"] = settings.db_pool_size if settings.db_pool_size is not None else 5
    kwargs["max_overflow"] = (
        settings.db_max_overflow if settings.db_max_overflow is not None else 10
    )
    kwargs["pool_recycle"] = 3600
    return kwargs


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use (when a connection string is set)."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    database_url = get_settings().database_url
    if not database_url:
        return
    engine = create_async_engine(database_url, **_engine_kwargs(database_url))
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )
    logger.info("Database engine created (%s)", engine.url.get_backend_name())
    if get_settings().telemetry_enabled:
        from app.shared.telemetry.telemetry import get_telemetry

        telemetry = get_telemetry()
        if telemetry is not None:
            telemetry.instrument_sqlalchemy(engine)


async def dispose_engine() -> None:
    """Dispose the engine (if created) and reset the session factory."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _require_session_factory() -> async_sessionmaker[AsyncSession]:
    _ensure_engine()
    if AsyncSessionLocal is None:
        logger.error(
            "SQL database not configured: set ConnectionStrings:DefaultConnection in "
            "appsettings.json (or CONNECTION_STRINGS__DEFAULT_CONNECTION), then run: "
            "alembic upgrade head"
        )
        raise SqlNotConfiguredException()
    return AsyncSessionLocal


async def get_db():
    """Database session dependency for read operations.

    Yields a session scoped to the request and closes it on exit.
    Raises SqlNotConfiguredException when no connection string is set.
    """
    session_factory = _require_session_factory()
    async with session_factory() as session:
        yield session
