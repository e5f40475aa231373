"""Pen that calculates the signed area of the outline drawn onto it."""

from glyphpen.config import PenConfig
from glyphpen.core.base import BasePen
from glyphpen.domain import GlyphSet, Point
from glyphpen.exceptions import MissingPrevPointError, OpenContourError


class AreaPen(BasePen):
    """Accumulates the signed area of all contours drawn onto it.

    Counter-clockwise contours add to the area, clockwise contours subtract
    from it. Curves are measured exactly, not flattened.

    Attributes:
        value: Signed area accumulated so far
    """

    def __init__(
        self,
        glyph_set: GlyphSet | None = None,
        config: PenConfig | None = None,
    ) -> None:
        super().__init__(glyph_set, config)
        self.value = 0.0
        self._prev_point: Point | None = None
        self._start_point: Point | None = None

    def unload(self) -> float:
        """Return and then reset the calculated area."""
        value = self.value
        self.value = 0.0
        return value

    def _require_prev_point(self) -> Point:
        if self._prev_point is None:
            raise MissingPrevPointError()
        return self._prev_point

    def _moveTo(self, pt: Point) -> None:
        self._prev_point = pt
        self._start_point = pt

    def _lineTo(self, pt: Point) -> None:
        x0, y0 = self._require_prev_point()
        x1, y1 = pt
        self.value -= (x1 - x0) * (y1 + y0) * 0.5
        self._prev_point = pt

    def _qCurveToOne(self, pt1: Point, pt2: Point) -> None:
        # https://github.com/Pomax/bezierinfo/issues/44
        x0, y0 = self._require_prev_point()
        x1, y1 = pt1[0] - x0, pt1[1] - y0
        x2, y2 = pt2[0] - x0, pt2[1] - y0
        self.value -= (x2 * y1 - x1 * y2) / 3
        self._lineTo(pt2)

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point) -> None:
        # https://github.com/Pomax/bezierinfo/issues/44
        x0, y0 = self._require_prev_point()
        x1, y1 = pt1[0] - x0, pt1[1] - y0
        x2, y2 = pt2[0] - x0, pt2[1] - y0
        x3, y3 = pt3[0] - x0, pt3[1] - y0
        self.value -= (
            x1 * (-y2 - y3) +
            x2 * (y1 - 2 * y3) +
            x3 * (y1 + 2 * y2)
        ) * 3 / 20
        self._lineTo(pt3)

    def _closePath(self) -> None:
        self._require_prev_point()
        self._lineTo(self._start_point)
        self._prev_point = None
        self._start_point = None

    def _endPath(self) -> None:
        if self._prev_point != self._start_point:
            raise OpenContourError()
        self._prev_point = None
        self._start_point = None
