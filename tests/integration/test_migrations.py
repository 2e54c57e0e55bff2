"""Alembic migrations: upgrade/downgrade on SQLite and offline DDL for SQL Server."""

import io
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def _alembic_config(db_path: Path) -> Config:
    cfg = Config(str(ALEMBIC_INI))
    cfg.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    cfg.attributes["configure_logger"] = False
    return cfg


def _inspect(db_path: Path):
    engine = create_engine(f"sqlite:///{db_path}")
    return engine, inspect(engine)


@pytest.mark.requires_db
def test_initial_migration_creates_users_table(tmp_path: Path) -> None:
    db_path = tmp_path / "migrate.db"
    command.upgrade(_alembic_config(db_path), "head")

    engine, inspector = _inspect(db_path)
    try:
        assert "Users" in inspector.get_table_names()
        columns = [c["name"] for c in inspector.get_columns("Users")]
        assert columns == ["Id", "FirstName", "LastName"]
        assert inspector.get_pk_constraint("Users")["constrained_columns"] == ["Id"]
    finally:
        engine.dispose()


@pytest.mark.requires_db
def test_downgrade_drops_users_table(tmp_path: Path) -> None:
    db_path = tmp_path / "migrate.db"
    cfg = _alembic_config(db_path)
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine, inspector = _inspect(db_path)
    try:
        assert "Users" not in inspector.get_table_names()
    finally:
        engine.dispose()


def test_offline_sql_for_sql_server_uses_nvarchar_names() -> None:
    buffer = io.StringIO()
    cfg = Config(str(ALEMBIC_INI), output_buffer=buffer)
    cfg.set_main_option("sqlalchemy.url", "mssql+pyodbc://")
    cfg.attributes["configure_logger"] = False
    command.upgrade(cfg, "head", sql=True)

    sql = buffer.getvalue()
    assert "CREATE TABLE [Users]" in sql
    assert "[FirstName] NVARCHAR(max) NOT NULL" in sql
    assert "[LastName] NVARCHAR(max) NOT NULL" in sql
