"""Configuration management for tellme."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
import os
import sys
import tempfile

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

APP_NAME = "tellme"


def default_config_dir() -> Path:
    """Return the platform-standard configuration directory for tellme."""

    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / APP_NAME
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / APP_NAME
        return home / "AppData" / "Roaming" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return home / ".config" / APP_NAME


def default_temp_dir() -> Path:
    return Path(tempfile.gettempdir()) / APP_NAME


class TellmeSettings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    config_dir: Path = Field(default_factory=default_config_dir, validation_alias="TELLME_CONFIG_DIR")
    temp_dir: Path = Field(default_factory=default_temp_dir, validation_alias="TELLME_TEMP_DIR")
    shell_pid: int | None = Field(default=None, validation_alias="TELLME_SHELL_PID")
    log_level: str = Field(default="WARNING", validation_alias="TELLME_LOG_LEVEL")

    @field_validator("config_dir", mode="before")
    @classmethod
    def _default_blank_config_dir(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return default_config_dir()
        return value

    @field_validator("temp_dir", mode="before")
    @classmethod
    def _default_blank_temp_dir(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return default_temp_dir()
        return value

    @field_validator("shell_pid", mode="before")
    @classmethod
    def _parse_shell_pid(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
        return value

    @field_validator("shell_pid")
    @classmethod
    def _validate_shell_pid(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError("TELLME_SHELL_PID must be a non-negative integer")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(
                "TELLME_LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG"
            )
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> TellmeSettings:
    """Return cached settings instance."""

    try:
        settings = TellmeSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid tellme environment: {exc}") from exc
    settings.config_dir = settings.config_dir.expanduser()
    settings.temp_dir = settings.temp_dir.expanduser()
    return settings


__all__ = ["TellmeSettings", "default_config_dir", "default_temp_dir", "get_settings"]
