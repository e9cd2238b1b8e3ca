"""
Configuration management for employees-seed.

Loads the connection descriptor from a JSON file and runtime settings from
the environment, using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from employees_seed.exceptions import ConfigIOError, ConfigParseError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "conString.json"


class ConnectionConfig(BaseModel):
    """Connection descriptor read from conString.json."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    connection_string: str = Field(
        alias="connectionString",
        description="PostgreSQL connection string (URL or key=value form)",
    )

    @classmethod
    def from_json(cls, path: Path | str) -> ConnectionConfig:
        """
        Load the connection descriptor from a JSON file.

        Args:
            path: Path to the JSON file

        Returns:
            ConnectionConfig instance

        Raises:
            ConfigIOError: If the file can't be opened or read
            ConfigParseError: If the contents aren't valid JSON or lack
                connectionString
        """
        config_path = Path(path)
        try:
            with open(config_path, encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise ConfigIOError(config_path, e.strerror or str(e)) from e

        try:
            config = cls.model_validate_json(raw)
        except ValidationError as e:
            reasons = "; ".join(
                f"{'.'.join(map(str, err['loc']))}: {err['msg']}" if err["loc"] else err["msg"]
                for err in e.errors()
            )
            raise ConfigParseError(config_path, reasons) from e

        logger.info(f"Loaded connection settings from {config_path}")
        return config


class Settings(BaseSettings):
    """Runtime settings, overridable with EMPLOYEES_SEED_* variables."""

    model_config = SettingsConfigDict(env_prefix="EMPLOYEES_SEED_")

    config_path: Path = Field(
        default=Path(DEFAULT_CONFIG_FILE),
        description="JSON file holding the connection string",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root log level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case (e.g. "info")."""
        return value.upper() if isinstance(value, str) else value


def load_connection_string(path: Path | str = DEFAULT_CONFIG_FILE) -> str:
    """Return the connectionString stored in the JSON file at path."""
    return ConnectionConfig.from_json(path).connection_string
