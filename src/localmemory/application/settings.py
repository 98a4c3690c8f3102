"""
Server Settings
===============

Loads the server configuration from an optional YAML file and environment
overrides, validated by a Pydantic model.

Resolution order (later wins):
1. Model defaults
2. YAML file (explicit ``config_path`` or ``LOCALMEMORY_CONFIG``)
3. Environment variables (``LOCALMEMORY_MEMORY_DIR``, ``LOCALMEMORY_HOST``,
   ``LOCALMEMORY_PORT``, ``LOGLEVEL``)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from localmemory.core.domain.errors import ConfigError
from localmemory.core.utils.paths import get_project_root

logger = structlog.get_logger(__name__)

CONFIG_ENV_VAR = "LOCALMEMORY_CONFIG"

_ENV_OVERRIDES: dict[str, str] = {
    "LOCALMEMORY_MEMORY_DIR": "memory_dir",
    "LOCALMEMORY_HOST": "host",
    "LOCALMEMORY_PORT": "port",
    "LOGLEVEL": "log_level",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _default_memory_dir() -> Path:
    return get_project_root() / ".gitmemory"


class ServerSettings(BaseModel):
    """Validated server configuration."""

    model_config = ConfigDict(extra="forbid")

    memory_dir: Path = Field(
        default_factory=_default_memory_dir,
        description="Root directory holding the data and files directories",
    )
    data_dir_name: str = Field("data", min_length=1)
    files_dir_name: str = Field("files", min_length=1)
    host: str = "127.0.0.1"
    port: int = Field(3001, ge=1, le=65535)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )
    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
    )
    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["Content-Type", "Authorization", "Cookie"]
    )
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def data_dir(self) -> Path:
        """Directory holding one JSON file per document."""
        return self.memory_dir / self.data_dir_name

    @property
    def files_dir(self) -> Path:
        """Directory holding uploaded blobs."""
        return self.memory_dir / self.files_dir_name


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", details={"path": str(path)}
        )
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Invalid YAML in {path}: {exc}", details={"path": str(path)}
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a mapping: {path}",
            details={"path": str(path)},
        )
    return data


def load_settings(config_path: str | Path | None = None) -> ServerSettings:
    """Build settings from defaults, an optional YAML file and the environment.

    Raises:
        ConfigError: If the file is missing or invalid, or a value fails
            validation.
    """
    raw: dict[str, Any] = {}
    source = config_path or os.getenv(CONFIG_ENV_VAR)
    if source:
        raw.update(_read_yaml(Path(source)))

    for env_var, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            raw[key] = value

    try:
        settings = ServerSettings(**raw)
    except PydanticValidationError as exc:
        raise ConfigError(
            f"Invalid configuration: {exc}",
            details={"source": str(source) if source else None},
        ) from exc

    logger.debug(
        "settings.loaded",
        source=str(source) if source else "defaults",
        memory_dir=str(settings.memory_dir),
    )
    return settings


def ensure_directories(settings: ServerSettings) -> None:
    """Create the memory, data and files directories if missing."""
    for directory in (settings.memory_dir, settings.data_dir, settings.files_dir):
        directory.mkdir(parents=True, exist_ok=True)
