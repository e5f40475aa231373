"""Configuration management for glyphpen.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PenConfig: Pen behaviour settings
- LoggingConfig: Logging settings
- GlyphpenSettings: Main application settings
"""

from glyphpen.config.settings import (
    GlyphpenSettings,
    LoggingConfig,
    PenConfig,
    get_default_settings,
)

__all__ = [
    "GlyphpenSettings",
    "LoggingConfig",
    "PenConfig",
    "get_default_settings",
]
