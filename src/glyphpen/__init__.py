"""Glyphpen - Pen protocol and segment decomposition for glyph outlines.

Glyphpen lets outline sources describe their shapes as a stream of drawing
commands (moveTo, lineTo, curveTo, qCurveTo, closePath, endPath, addComponent)
against a pen, without knowing what the pen does with them. Pens measure,
transform, record or forward the stream.

Example:
    >>> from glyphpen import AreaPen
    >>> pen = AreaPen()
    >>> pen.moveTo((0, 0))
    >>> pen.lineTo((100, 0))
    >>> pen.lineTo((100, 100))
    >>> pen.lineTo((0, 100))
    >>> pen.closePath()
    >>> pen.value
    10000.0
"""

import logging

__version__ = "0.1.0"

from glyphpen.core import (
    AbstractPen,
    AreaPen,
    BasePen,
    FilterPen,
    RecordingPen,
    TransformPen,
    decompose_quadratic_segment,
    decompose_super_bezier_segment,
)
from glyphpen.domain import IMPLIED, Glyph, Point

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "IMPLIED",
    "AbstractPen",
    "AreaPen",
    "BasePen",
    "FilterPen",
    "Glyph",
    "Point",
    "RecordingPen",
    "TransformPen",
    "__version__",
    "decompose_quadratic_segment",
    "decompose_super_bezier_segment",
]
