"""Shared fixtures: a small TrueType font built on the fly."""

import logging
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen


def _square_glyph():
    # Clockwise, as TrueType outer contours are
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 100))
    pen.lineTo((100, 100))
    pen.lineTo((100, 0))
    pen.closePath()
    return pen.glyph()


def _arch_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((0, 100), (100, 100), (100, 0))
    pen.closePath()
    return pen.glyph()


def _blob_glyph():
    # A contour made only of off-curve points
    pen = TTGlyphPen(None)
    pen.qCurveTo((0, 0), (0, 200), (200, 200), (200, 0), None)
    pen.closePath()
    return pen.glyph()


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    """Build a TrueType font with simple, quadratic and composite glyphs.

    Glyphs:
        .notdef: empty
        square: 100x100 clockwise square, area -10000
        arch: quadratic arch
        blob: off-curve-only contour
        halfsquare: component of square scaled by 0.5 and shifted, area -2500
    """
    glyphs = {
        ".notdef": TTGlyphPen(None).glyph(),
        "square": _square_glyph(),
        "arch": _arch_glyph(),
        "blob": _blob_glyph(),
    }
    composite_pen = TTGlyphPen(glyphs)
    composite_pen.addComponent("square", (0.5, 0, 0, 0.5, 300, 20))
    glyphs["halfsquare"] = composite_pen.glyph()

    glyph_order = [".notdef", "square", "arch", "blob", "halfsquare"]

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x41: "square", 0x42: "arch", 0x43: "blob", 0x44: "halfsquare"})
    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (500, getattr(glyf[name], "xMin", 0)) for name in glyph_order}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Glyphpen Test", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    path = tmp_path / "GlyphpenTest-Regular.ttf"
    fb.save(str(path))
    return path


@pytest.fixture(autouse=True)
def _reset_logging():
    """Remove handlers installed by configure_logging after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_glyphpen", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
