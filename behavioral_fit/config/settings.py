"""Configuration settings for behavioral-fit."""

from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutputFormat(str, Enum):
    """How the CLI prints fit results."""

    TEXT = "text"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file. Scoring rules live in
    `behavioral_fit.scoring.config.FitConfig`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(
        default=Path("./data"),
        description="Root of the profile directory (profiles/ and roles/)",
    )
    output_dir: Path = Field(
        default=Path("./artifacts"),
        description="Base directory for relative --out paths of the CLI",
    )

    # Output
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="CLI output: 'text' report or 'json' payload",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, v: str | OutputFormat) -> OutputFormat:
        """Convert string output format to OutputFormat enum."""
        if isinstance(v, OutputFormat):
            return v
        if isinstance(v, str):
            v_lower = v.lower().strip()
            if v_lower == "text":
                return OutputFormat.TEXT
            elif v_lower == "json":
                return OutputFormat.JSON
            else:
                raise ValueError(
                    f"Invalid output format: {v}. Must be 'text' or 'json'"
                )
        raise ValueError(f"Invalid output format type: {type(v)}")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
