"""Font I/O layer for glyphpen.

This module loads font files using fonttools and exposes their glyphs as
outline sources for pens.

Key classes:
- FontReader: Load fonts and access their glyph set
"""

from glyphpen.io.converter import fonttools_glyph_to_domain
from glyphpen.io.reader import FontReader

__all__ = [
    "FontReader",
    "fonttools_glyph_to_domain",
]
