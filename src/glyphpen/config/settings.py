"""Configuration settings for Glyphpen."""

from pathlib import Path

from pydantic import BaseModel, Field


class PenConfig(BaseModel):
    """Configuration for pen behaviour."""

    skip_missing_components: bool = Field(
        default=True,
        description="Skip components missing from the glyph set instead of raising",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphpenSettings(BaseModel):
    """Main application settings."""

    pen: PenConfig = Field(default_factory=PenConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphpenSettings:
    """Get default application settings."""
    return GlyphpenSettings()
