"""Converters between fonttools glyphs and domain models."""

from typing import Any

from fontTools.pens.recordingPen import RecordingPen

from glyphpen.domain import Glyph


def fonttools_glyph_to_domain(name: str, fonttools_glyph: Any) -> Glyph:
    """Convert a fonttools glyph to a domain Glyph.

    The glyph is drawn onto a fonttools RecordingPen, which keeps the calls
    exactly as the font emits them (multi-point qCurveTo runs, implied
    on-curve points and component references are preserved).

    Args:
        name: Name of the glyph
        fonttools_glyph: The fonttools glyph object from a GlyphSet

    Returns:
        Domain Glyph model
    """
    pen = RecordingPen()
    fonttools_glyph.draw(pen)
    return Glyph(name=name, commands=[(op, tuple(args)) for op, args in pen.value])
