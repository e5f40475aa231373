"""Pen that records the primitive segments drawn onto it."""

from typing import Any

from glyphpen.config import PenConfig
from glyphpen.core.base import BasePen
from glyphpen.domain import GlyphSet, Point


class RecordingPen(BasePen):
    """Records primitive drawing commands as ``(operator, args)`` tuples.

    Because the base pen decomposes every call before it reaches the
    hooks, a recording only ever holds plain segments: curveTo with three
    points and qCurveTo with two. Components are drawn into the recording,
    not recorded as references.

    Example:
        pen = RecordingPen()
        glyph.draw(pen)
        pen.value
        # [('moveTo', (Point(x=0.0, y=0.0),)), ('lineTo', ...), ('closePath', ())]
    """

    def __init__(
        self,
        glyph_set: GlyphSet | None = None,
        config: PenConfig | None = None,
    ) -> None:
        super().__init__(glyph_set, config)
        self.value: list[tuple[str, tuple[Any, ...]]] = []

    def _moveTo(self, pt: Point) -> None:
        self.value.append(("moveTo", (pt,)))

    def _lineTo(self, pt: Point) -> None:
        self.value.append(("lineTo", (pt,)))

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point) -> None:
        self.value.append(("curveTo", (pt1, pt2, pt3)))

    def _qCurveToOne(self, pt1: Point, pt2: Point) -> None:
        self.value.append(("qCurveTo", (pt1, pt2)))

    def _closePath(self) -> None:
        self.value.append(("closePath", ()))

    def _endPath(self) -> None:
        self.value.append(("endPath", ()))

    def replay(self, pen: Any) -> None:
        """Draw the recorded commands onto another pen.

        Args:
            pen: Any object implementing the pen protocol
        """
        for operator, args in self.value:
            getattr(pen, operator)(*args)

    draw = replay
