"""Configuration management for severity-log."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...domain.enums import OutputFormat, Severity, SinkType
from .logging import DiagnosticsLevel
from .logging import setup_diagnostics as configure_diagnostics


class Settings(BaseSettings):
    """Logger settings loaded from environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Threshold and output
    LOG_LEVEL: Severity = Field(default=Severity.INFO)
    LOG_FORMAT: OutputFormat = Field(default=OutputFormat.JSON)
    LOG_SINK: SinkType = Field(default=SinkType.STDOUT)

    # File sink
    LOG_FILE_PATH: str = Field(default="logs/app.log")
    LOG_MAX_FILE_SIZE: int = Field(default=10 * 1024 * 1024)  # 10MB
    LOG_BACKUP_COUNT: int = Field(default=5, ge=0)

    # HTTP sink
    LOG_HTTP_URL: str | None = Field(default=None)
    LOG_HTTP_TIMEOUT: float = Field(default=5.0, gt=0, le=300)
    LOG_HTTP_QUEUE_SIZE: int = Field(default=1000, ge=1)

    # Package diagnostics
    LOG_DIAGNOSTICS_LEVEL: DiagnosticsLevel = Field(default=DiagnosticsLevel.WARNING)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def coerce_threshold(cls, v: Any) -> Severity:
        """Fall back to info for blank or unrecognized thresholds."""
        return Severity.coerce(v, Severity.INFO)

    @field_validator("LOG_FORMAT", "LOG_SINK", mode="before")
    @classmethod
    def lowercase_choice(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("LOG_MAX_FILE_SIZE")
    @classmethod
    def validate_file_size(cls, v: int) -> int:
        """Validate file size is reasonable."""
        if v < 1024 * 1024:  # 1MB minimum
            raise ValueError("Max file size must be at least 1MB")
        if v > 100 * 1024 * 1024:  # 100MB maximum
            raise ValueError("Max file size cannot exceed 100MB")
        return v

    @field_validator("LOG_DIAGNOSTICS_LEVEL", mode="before")
    @classmethod
    def uppercase_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_http_url(self) -> Settings:
        """Require a collector URL when the HTTP sink is selected."""
        if self.LOG_SINK == SinkType.HTTP and not self.LOG_HTTP_URL:
            raise ValueError("LOG_HTTP_URL is required when LOG_SINK is http")
        return self

    def setup_diagnostics(self) -> None:
        """Initialize the package's own diagnostic logging."""
        configure_diagnostics(self.LOG_DIAGNOSTICS_LEVEL)


def get_settings(**overrides: Any) -> Settings:
    """Load settings from the environment, applying explicit overrides.

    Returns a new instance on every call.
    """
    return Settings(**overrides)
