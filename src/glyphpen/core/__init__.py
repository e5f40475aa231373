"""Core drawing engine for glyphpen.

This module contains:

- The pen protocol and the base pen that implements it on top of
  primitive hooks (current point tracking, curve dispatch, components)
- Segment decomposition for super Beziers and quadratic runs
- Filter pens that forward, optionally transformed, to another pen
- Concrete pens for measuring and recording outlines

Key functions:
- decompose_super_bezier_segment: Split a super Bezier into cubic segments
- decompose_quadratic_segment: Split a quadratic run at implied points

Key classes:
- AbstractPen: The pen protocol
- BasePen: Base class for pens implementing primitive hooks only
- FilterPen: Forwards every command to another pen
- TransformPen: Applies an affine transformation while forwarding
- AreaPen: Accumulates signed area
- RecordingPen: Records primitive segments
"""

from glyphpen.core.area import AreaPen
from glyphpen.core.base import AbstractPen, BasePen
from glyphpen.core.decompose import (
    decompose_quadratic_segment,
    decompose_super_bezier_segment,
)
from glyphpen.core.filter import FilterPen, TransformPen
from glyphpen.core.recording import RecordingPen

__all__ = [
    # Protocol and base
    "AbstractPen",
    "BasePen",
    # Filters
    "FilterPen",
    "TransformPen",
    # Concrete pens
    "AreaPen",
    "RecordingPen",
    # Decomposition functions
    "decompose_quadratic_segment",
    "decompose_super_bezier_segment",
]
