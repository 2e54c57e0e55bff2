"""Seeding script: name parsing and inserting into a configured database."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine

from app.infrastructure.persistence import database
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models import User
from app.infrastructure.persistence.repositories import UserRepository
from scripts.seed_users import main, parse_full_name


def test_parse_full_name() -> None:
    assert parse_full_name("Ann Lee") == ("Ann", "Lee")
    assert parse_full_name("  Mary Ann Smith ") == ("Mary", "Ann Smith")


@pytest.mark.parametrize("value", ["Cher", "", "   "])
def test_parse_full_name_rejects_single_word(value: str) -> None:
    with pytest.raises(ValueError):
        parse_full_name(value)


async def test_main_without_arguments_prints_usage(capsys) -> None:
    assert await main([]) == 1
    assert "Usage" in capsys.readouterr().err


async def test_main_rejects_bad_name_before_touching_database(capsys) -> None:
    assert await main(["Cher"]) == 1
    assert "Expected" in capsys.readouterr().err


async def test_main_without_connection_string_exits_with_error(
    tmp_path, monkeypatch, capsys
) -> None:
    monkeypatch.setenv("SETTINGS_FILE", str(tmp_path / "appsettings.json"))
    monkeypatch.delenv("CONNECTION_STRINGS__DEFAULT_CONNECTION", raising=False)
    monkeypatch.setattr(database, "engine", None)
    monkeypatch.setattr(database, "AsyncSessionLocal", None)

    assert await main(["Ann Lee"]) == 1
    assert "Database not configured" in capsys.readouterr().err


async def _create_seed_database(tmp_path) -> str:
    url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    return url


@pytest.mark.requires_db
async def test_main_inserts_users(tmp_path, monkeypatch, capsys) -> None:
    url = await _create_seed_database(tmp_path)
    monkeypatch.setenv("CONNECTION_STRINGS__DEFAULT_CONNECTION", url)

    assert await main(["Ann Lee", "Bo Kim"]) == 0

    out = capsys.readouterr().out
    assert "Created user: 1 (Ann Lee)" in out
    assert "Created user: 2 (Bo Kim)" in out


@pytest.mark.requires_db
async def test_main_prints_nothing_when_a_later_insert_fails(
    tmp_path, monkeypatch, capsys
) -> None:
    url = await _create_seed_database(tmp_path)
    monkeypatch.setenv("CONNECTION_STRINGS__DEFAULT_CONNECTION", url)
    create_user = UserRepository.create_user

    async def _fail_on_second(self, first_name: str, last_name: str):
        if first_name == "Bo":
            raise RuntimeError("insert failed")
        return await create_user(self, first_name, last_name)

    monkeypatch.setattr(UserRepository, "create_user", _fail_on_second)

    with pytest.raises(RuntimeError, match="insert failed"):
        await main(["Ann Lee", "Bo Kim"])

    assert "Created user" not in capsys.readouterr().out
    engine = create_async_engine(url)
    try:
        async with engine.connect() as conn:
            count = (await conn.execute(select(func.count()).select_from(User))).scalar_one()
    finally:
        await engine.dispose()
    assert count == 0
