"""Pens that forward drawing commands to another pen.

Key classes:
- FilterPen: Passes every call through unchanged
- TransformPen: Applies an affine transformation before passing calls on
"""

from typing import Any

from fontTools.misc.transform import Transform

from glyphpen.core.base import AbstractPen
from glyphpen.domain import Point, is_implied


class FilterPen(AbstractPen):
    """Base class for pens that hand their commands to another pen.

    Subclasses override the methods they want to filter; everything else
    reaches the output pen untouched. Errors raised downstream propagate
    to the caller.
    """

    def __init__(self, out_pen: AbstractPen) -> None:
        """Initialize the filter.

        Args:
            out_pen: Pen that receives the forwarded commands
        """
        self.out_pen = out_pen

    def moveTo(self, pt: Any) -> None:
        self.out_pen.moveTo(pt)

    def lineTo(self, pt: Any) -> None:
        self.out_pen.lineTo(pt)

    def curveTo(self, *points: Any) -> None:
        self.out_pen.curveTo(*points)

    def qCurveTo(self, *points: Any) -> None:
        self.out_pen.qCurveTo(*points)

    def closePath(self) -> None:
        self.out_pen.closePath()

    def endPath(self) -> None:
        self.out_pen.endPath()

    def addComponent(self, glyph_name: str, transformation: Any) -> None:
        self.out_pen.addComponent(glyph_name, transformation)


class TransformPen(FilterPen):
    """Pen that transforms all coordinates and passes them to another pen.

    Components are forwarded too, with their transformation composed with
    this pen's own, so nested components end up in the right place.

    Example:
        pen = TransformPen(area_pen, (2, 0, 0, 2, 0, 0))
        glyph.draw(pen)  # area_pen measures the glyph scaled by 2
    """

    def __init__(self, out_pen: AbstractPen, transformation: Any) -> None:
        """Initialize the transform pen.

        Args:
            out_pen: Pen that receives the transformed commands
            transformation: fontTools Transform or 6-item sequence
                (xx, xy, yx, yy, dx, dy)
        """
        super().__init__(out_pen)
        if not isinstance(transformation, Transform):
            transformation = Transform(*transformation)
        self.transformation = transformation

    def _transform_point(self, pt: Any) -> Point:
        return Point(*self.transformation.transformPoint(Point.coerce(pt)))

    def moveTo(self, pt: Any) -> None:
        self.out_pen.moveTo(self._transform_point(pt))

    def lineTo(self, pt: Any) -> None:
        self.out_pen.lineTo(self._transform_point(pt))

    def curveTo(self, *points: Any) -> None:
        self.out_pen.curveTo(*(self._transform_point(p) for p in points))

    def qCurveTo(self, *points: Any) -> None:
        # Absent on-curve markers pass through as they are
        transformed = [p if is_implied(p) else self._transform_point(p) for p in points]
        self.out_pen.qCurveTo(*transformed)

    def addComponent(self, glyph_name: str, transformation: Any) -> None:
        if not isinstance(transformation, Transform):
            transformation = Transform(*transformation)
        self.out_pen.addComponent(glyph_name, self.transformation.transform(transformation))
