"""Application settings.

Pydantic-based configuration; every setting can be overridden through an
environment variable with the ``OPENIBAN_`` prefix or a ``.env`` file.

Environment Variables:
- OPENIBAN_DEBUG: Enable debug logging (default: false)
- OPENIBAN_LOG_LEVEL: Logging level (default: INFO)
- OPENIBAN_JSON_LOGS: Emit JSON log lines (default: false)
- OPENIBAN_DEV_MODE: Colourful console logs (default: true)
- OPENIBAN_MIN_INPUT_LENGTH: Length gate for normalized input (default: 5)
- OPENIBAN_OUTPUT_FORMAT: CLI output format, rich or json (default: rich)
- OPENIBAN_SHOW_UNNAMED_ELEMENTS: Render unnamed BBAN fields (default: true)

The validation engine never reads settings; only the CLI and the input
normalization helpers do.
"""

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from openiban.exceptions import ConfigurationError, wrap_exception

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """OpenIBAN settings.

    Usage:
        settings = get_settings()
        min_length = settings.min_input_length

        # After changing OPENIBAN_* variables
        settings = reload_settings()
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENIBAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Output JSON log lines")
    dev_mode: bool = Field(default=True, description="Development-friendly console logs")

    # Input normalization
    min_input_length: int = Field(
        default=5,
        ge=0,
        le=34,
        description="Inputs are validated only once their normalized length exceeds this",
    )

    # Rendering
    output_format: Literal["rich", "json"] = Field(
        default="rich",
        description="Default CLI output format",
    )
    show_unnamed_elements: bool = Field(
        default=True,
        description="Render BBAN fields that have no published name",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise wrap_exception(
            e,
            "Invalid OpenIBAN settings",
            exception_class=ConfigurationError,
            errors=e.error_count(),
        ) from e


def get_settings() -> Settings:
    """Get or create the settings singleton."""
    global _settings

    if _settings is None:
        _settings = _load_settings()
    return _settings


def reload_settings() -> Settings:
    """Re-read settings from the environment and replace the singleton."""
    global _settings

    _settings = _load_settings()
    return _settings


def override_settings(**changes: Any) -> Settings:
    """Replace the singleton with a copy carrying ``changes`` (e.g. CLI flags)."""
    global _settings

    _settings = get_settings().model_copy(update=changes)
    return _settings
