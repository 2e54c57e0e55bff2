"""Pytest configuration and fixtures for userlist.

Uses app.main:app for HTTP tests. DB-dependent fixtures run against a
throwaway SQLite file (aiosqlite) and override the get_db dependency, so
no external database is needed.
"""

import logging
import os

# Pin the environment before app.main builds the app (HSTS, error pages).
os.environ["ENVIRONMENT"] = "Production"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.application.dtos.user import UserResult
from app.core.config import get_settings
from app.infrastructure.persistence import models  # noqa: F401  (registers tables)
from app.infrastructure.persistence.database import Base, get_db
from app.infrastructure.persistence.repositories import UserRepository
from app.main import app


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings after each test so env changes do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def db_engine(tmp_path):
    """Async engine on an empty SQLite file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'userlist.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Database session for repository tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def seed_users(session_factory):
    """Return an async helper inserting (first_name, last_name) pairs in one transaction."""

    async def _seed(*names: tuple[str, str]) -> list[UserResult]:
        async with session_factory() as session:
            async with session.begin():
                repo = UserRepository(session)
                return [await repo.create_user(first, last) for first, last in names]

    return _seed


def _override_db(session_factory: async_sessionmaker[AsyncSession]):
    async def _get_db():
        async with session_factory() as session:
            yield session

    return _get_db


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by the test database."""
    app.dependency_overrides[get_db] = _override_db(session_factory)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def unreachable_client(tmp_path) -> AsyncClient:
    """Client whose database cannot be opened (SQLite file in a missing directory)."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing-dir' / 'userlist.db'}"
    )
    app.dependency_overrides[get_db] = _override_db(
        async_sessionmaker(engine, expire_on_commit=False)
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.fixture
async def raw_client() -> AsyncClient:
    """Client with no dependency overrides that returns 500 responses instead of raising."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    logging.disable(logging.NOTSET)
    root.handlers[:] = handlers
    root.setLevel(level)
