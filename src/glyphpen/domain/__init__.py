"""Domain models for glyphpen.

This module contains the value types exchanged through the pen protocol.
All models are designed to be:

- Immutable where possible (named tuples, frozen dataclasses)
- Compatible with the plain tuples used by other pen libraries
- Independent of any particular font storage format

Key classes:
- Point: An immutable 2D coordinate
- QuadraticRun: Validated qCurveTo arguments with implied-point handling
- Glyph: An in-memory outline stored as pen commands
"""

from glyphpen.domain.outline import Glyph, GlyphSet, Outline
from glyphpen.domain.point import (
    IMPLIED,
    ImpliedOnCurve,
    Point,
    QuadraticRun,
    is_implied,
)

__all__: list[str] = [
    # Markers
    "IMPLIED",
    "ImpliedOnCurve",
    "is_implied",
    # Core types
    "Point",
    "QuadraticRun",
    # Outlines
    "Outline",
    "Glyph",
    "GlyphSet",
]
