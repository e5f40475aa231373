"""Utility functions for glyphpen.

This module provides logging setup and drawing statistics helpers.
"""

from glyphpen.utils.logging import (
    DrawingLogger,
    DrawingStats,
    configure_logging,
)

__all__ = [
    "DrawingLogger",
    "DrawingStats",
    "configure_logging",
]
