"""Runtime settings for the telemetry ingestion service.

Settings come from three layers, later layers winning:

1. Field defaults on ``ServiceSettings``
2. An optional YAML file named by ``TELEMETRY_CONFIG``
3. ``TELEMETRY_*`` environment variables (a ``.env`` file is honoured)
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "TELEMETRY_CONFIG"

# Settings field -> environment variable
ENV_VARS: dict[str, str] = {
    "database_url": "TELEMETRY_DATABASE_URL",
    "host": "TELEMETRY_HOST",
    "port": "TELEMETRY_PORT",
    "log_level": "TELEMETRY_LOG_LEVEL",
}


class ServiceSettings(BaseModel):
    """Where the service listens and where submissions are stored."""

    database_url: str = Field(
        "sqlite:///telemetry.db",
        description="SQLAlchemy URL of the database holding the telemetry table",
    )
    host: str = Field("0.0.0.0", description="Interface the HTTP server binds to")
    port: int = Field(8080, ge=1, le=65535)
    log_level: str = Field("INFO", description="Root logger level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def load(cls, path: str | Path) -> "ServiceSettings":
        """Load settings from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not hold a YAML mapping
        """
        return cls(**_read_yaml(path))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceSettings":
        """Build settings from the optional YAML file plus environment overrides."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        data: dict[str, Any] = {}
        config_path = environ.get(CONFIG_ENV_VAR)
        if config_path:
            data.update(_read_yaml(config_path))

        for field_name, env_var in ENV_VARS.items():
            value = environ.get(env_var)
            if value:
                data[field_name] = value
        return cls(**data)


def _read_yaml(path: str | Path) -> dict[str, Any]:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)

    if not isinstance(data, dict):
        raise ValueError(f"Empty or invalid YAML in {config_path}")
    return data


def load_settings(**overrides: Any) -> ServiceSettings:
    """Environment settings with the non-``None`` ``overrides`` validated on top."""
    settings = ServiceSettings.from_env()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return settings
    return ServiceSettings(**{**settings.model_dump(), **updates})
