"""Font reader for loading TTF/OTF fonts as outline sources.

This module provides the FontReader class. Parsing is left entirely to
fonttools; the reader exposes the font's glyph set, whose glyphs draw
themselves onto any pen.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont

from glyphpen.domain import Glyph
from glyphpen.io.converter import fonttools_glyph_to_domain


class FontReader:
    """Loads TTF/OTF fonts and exposes their glyphs.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        pen = AreaPen(glyph_set=reader.glyph_set)
        reader.glyph_set["A"].draw(pen)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._glyph_set: Any = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))
        self._glyph_set = None

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-flavoured fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_order(self) -> list[str]:
        """Return glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return list(self._require_font().getGlyphOrder())

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return len(self.glyph_order)

    @property
    def glyph_set(self) -> Any:
        """Return the font's glyph set, a mapping of names to drawable glyphs.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if self._glyph_set is None:
            self._glyph_set = font.getGlyphSet()
        return self._glyph_set

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Iterate over all glyphs as domain models, in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        for glyph_name in self.glyph_order:
            glyph = self.get_glyph(glyph_name)
            if glyph is not None:
                yield glyph

    def get_glyph(self, name: str) -> Glyph | None:
        """Get a specific glyph by name as a domain model.

        Args:
            name: Name of the glyph to retrieve

        Returns:
            Glyph domain model, or None if glyph not found

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        glyph_set = self.glyph_set
        if name not in glyph_set:
            return None
        return fonttools_glyph_to_domain(name, glyph_set[name])

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._glyph_set = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        if self._font is None:
            self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
