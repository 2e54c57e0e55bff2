"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings with
layered sources: environment variables and .env override
appsettings.<Environment>.json, which overrides appsettings.json.
The connection string is not validated at load time; a missing one
surfaces as SqlNotConfiguredException on first database use.
"""

import json
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from app.infrastructure.persistence.connection_string import to_sqlalchemy_url

DEFAULT_SETTINGS_FILE = "appsettings.json"
DEFAULT_ENVIRONMENT = "Production"

# .NET log level names (Logging:LogLevel:Default) to stdlib logging names.
_DOTNET_LOG_LEVELS: dict[str, str] = {
    "trace": "DEBUG",
    "debug": "DEBUG",
    "information": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
    "none": "DISABLED",
}

_PASCAL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _pascal_to_snake(key: str) -> str:
    """AllowedHosts -> allowed_hosts, ConnectionStrings -> connection_strings."""
    return _PASCAL_BOUNDARY_RE.sub("_", key).lower()


def translate_log_level(value: str) -> str:
    """Return a stdlib level name for a .NET or stdlib level name."""
    return _DOTNET_LOG_LEVELS.get(value.strip().lower(), value.strip().upper())


class ConnectionStrings(BaseModel):
    """ConnectionStrings section. DefaultConnection is the only one read."""

    model_config = ConfigDict(populate_by_name=True)

    default_connection: str = Field(
        default="",
        validation_alias=AliasChoices("DefaultConnection", "default_connection"),
    )


class AppSettingsJsonSource(PydanticBaseSettingsSource):
    """Settings source for appsettings.json style files.

    Reads the base file, then appsettings.<Environment>.json next to it;
    later files win. The environment name is taken from the first of
    environment_sources that sets one (constructor, env vars, .env), so
    the environment file matches settings.environment. Top-level
    PascalCase keys map to snake_case fields; Logging:LogLevel:Default
    maps to log_level. Missing files are skipped.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        base_file: Path,
        environment_sources: tuple[PydanticBaseSettingsSource, ...] = (),
    ) -> None:
        super().__init__(settings_cls)
        self.base_file = base_file
        self.environment_sources = environment_sources

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        # Unused: __call__ returns the merged mapping directly.
        return None, field_name, False

    def _resolve_environment(self) -> str:
        for source in self.environment_sources:
            value = source().get("environment")
            if value:
                return str(value)
        return DEFAULT_ENVIRONMENT

    @property
    def files(self) -> list[Path]:
        """Base settings file then the environment-specific one next to it."""
        base = self.base_file
        environment = self._resolve_environment()
        return [base, base.with_name(f"{base.stem}.{environment}{base.suffix}")]

    def _load(self, path: Path) -> dict[str, Any]:
        if not path.is_file():
            return {}
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
        data: dict[str, Any] = {}
        for key, value in raw.items():
            if key == "Logging":
                level = (value or {}).get("LogLevel", {}).get("Default")
                if level:
                    data["log_level"] = level
                continue
            data[_pascal_to_snake(key)] = value
        return data

    def __call__(self) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for path in self.files:
            for key, value in self._load(path).items():
                if isinstance(value, dict) and isinstance(merged.get(key), dict):
                    merged[key] = {**merged[key], **value}
                else:
                    merged[key] = value
        return merged


class Settings(BaseSettings):
    """Application settings loaded from environment, .env and appsettings files."""

    # App
    app_name: str = "userlist"
    app_version: str = "1.0.0"
    environment: str = DEFAULT_ENVIRONMENT
    debug: bool = False

    # Database
    connection_strings: ConnectionStrings = Field(default_factory=ConnectionStrings)
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Logging
    log_level: str = "INFO"

    # Hosts / request
    allowed_hosts: str = "*"
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry (needs the "telemetry" extra)
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            AppSettingsJsonSource(
                settings_cls,
                Path(os.environ.get("SETTINGS_FILE", DEFAULT_SETTINGS_FILE)),
                (init_settings, env_settings, dotenv_settings),
            ),
            file_secret_settings,
        )

    @property
    def is_development(self) -> bool:
        """True when running in the Development environment (or debug is on)."""
        return self.debug or self.environment.lower() == "development"

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL built from ConnectionStrings:DefaultConnection ('' if unset)."""
        return to_sqlalchemy_url(self.connection_strings.default_connection)

    @property
    def logging_level(self) -> str:
        """log_level translated to a stdlib logging level name."""
        return translate_log_level(self.log_level)

    @property
    def allowed_host_list(self) -> list[str]:
        """AllowedHosts split on ';' or ',' (ASP.NET uses ';')."""
        return [h.strip() for h in re.split(r"[;,]", self.allowed_hosts) if h.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() after changing env vars so the
    next get_settings() uses the new values.
    """
    return Settings()
