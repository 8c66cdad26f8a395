"""Process settings loaded from the environment."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gdrivecheck.errors import ConfigurationError

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Service settings.

    Every field is read from the environment variable of the same name
    (case-insensitive); a `.env` file in the working directory is read too.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    google_drive_api_key: str = Field(..., description="Drive API key")
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=3000, ge=1, le=65535, description="Listen port")
    log_level: str = Field(default="INFO", description="Log level")
    log_rich: bool = Field(default=True, description="Enable rich console logging")
    drive_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for each Drive API request",
    )
    drive_supports_all_drives: bool = Field(
        default=True,
        description="Include shared drives in Drive lookups",
    )

    @field_validator("google_drive_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("GOOGLE_DRIVE_API_KEY must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of {list(_LOG_LEVELS)}")
        return v.upper()


def load_settings(**overrides: object) -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationError: if a required value is missing or a value is invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in exc.errors()
        ]
        missing_key = any(
            err["loc"] and err["loc"][0] == "google_drive_api_key" for err in exc.errors()
        )
        message = (
            "GOOGLE_DRIVE_API_KEY environment variable not set"
            if missing_key
            else "Invalid settings"
        )
        raise ConfigurationError(
            message,
            details={"errors": problems},
            cause=exc,
        ) from exc


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
