"""The pen protocol and the base pen that implements it.

A pen is a middle man between an outline and whatever consumes it: the
outline draws itself onto a pen (``outline.draw(pen)``) without knowing
how or where it is drawn, and the pen does not need to know how the
outline is stored.

Key classes:
- AbstractPen: The pen protocol every drawing consumer implements
- BasePen: Implements the full protocol on top of a few primitive hooks,
  tracking the current point and decomposing multi-point curves
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from glyphpen.config import PenConfig
from glyphpen.core.decompose import (
    decompose_quadratic_segment,
    decompose_super_bezier_segment,
)
from glyphpen.domain import GlyphSet, Point, QuadraticRun
from glyphpen.exceptions import (
    ComponentCycleError,
    MissingComponentError,
    MissingCurrentPointError,
    NoPointsError,
    PrimitiveNotImplementedError,
)

logger = logging.getLogger(__name__)


class AbstractPen(ABC):
    """The pen protocol.

    Every subpath starts with moveTo() and must end with exactly one call
    to closePath() or endPath().
    """

    @abstractmethod
    def moveTo(self, pt: Any) -> None:
        """Begin a new subpath and set the current point to pt."""

    @abstractmethod
    def lineTo(self, pt: Any) -> None:
        """Draw a straight line from the current point to pt."""

    @abstractmethod
    def curveTo(self, *points: Any) -> None:
        """Draw a cubic Bezier with an arbitrary number of control points.

        The last point is on-curve, all others are off-curve. With n
        control points (the number of arguments minus 1): n == 2 draws a
        plain cubic, n == 1 falls back to a quadratic, n == 0 draws a line
        and n > 2 draws n - 1 cubic segments as one smooth super Bezier.
        """

    @abstractmethod
    def qCurveTo(self, *points: Any) -> None:
        """Draw a string of TrueType-style quadratic segments.

        The last point is on-curve, all others are off-curve. Between each
        two consecutive off-curve points there is an implied on-curve point
        halfway between them. The last point may be None (or IMPLIED) to
        draw a contour with no on-curve points at all.
        """

    @abstractmethod
    def closePath(self) -> None:
        """Close the current subpath."""

    @abstractmethod
    def endPath(self) -> None:
        """End the current subpath without closing it."""

    @abstractmethod
    def addComponent(self, glyph_name: str, transformation: Any) -> None:
        """Draw another glyph, transformed by a 6-item affine transformation."""


class BasePen(AbstractPen):
    """Base class for drawing pens.

    Subclasses implement the primitive hooks:

    - ``_moveTo(pt)``, ``_lineTo(pt)``, ``_curveToOne(pt1, pt2, pt3)``: required
    - ``_qCurveToOne(pt1, pt2)``: optional, defaults to an equivalent cubic
    - ``_closePath()``, ``_endPath()``: optional, default to doing nothing

    The public protocol methods are implemented here and should not be
    overridden. They coerce coordinates to Points, check that a current
    point exists, split multi-point curves into primitive segments and
    advance the current point after each primitive that succeeds.

    Example:
        class CountingPen(BasePen):
            def _moveTo(self, pt): self.count = 0
            def _lineTo(self, pt): self.count += 1
            def _curveToOne(self, pt1, pt2, pt3): self.count += 1

        pen = CountingPen()
        glyph.draw(pen)
    """

    def __init__(
        self,
        glyph_set: GlyphSet | None = None,
        config: PenConfig | None = None,
    ) -> None:
        """Initialize the pen.

        Args:
            glyph_set: Mapping of glyph names to outlines, used by addComponent
            config: Pen configuration (defaults to PenConfig())
        """
        self.glyph_set: GlyphSet = glyph_set if glyph_set is not None else {}
        self.config = config if config is not None else PenConfig()
        self._current_point: Point | None = None
        # Names of the components currently being drawn, outermost first
        self._component_stack: list[str] = []

    # Primitive hooks: must override

    def _moveTo(self, pt: Point) -> None:
        raise PrimitiveNotImplementedError("_moveTo")

    def _lineTo(self, pt: Point) -> None:
        raise PrimitiveNotImplementedError("_lineTo")

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point) -> None:
        raise PrimitiveNotImplementedError("_curveToOne")

    # Primitive hooks: may override

    def _closePath(self) -> None:
        pass

    def _endPath(self) -> None:
        pass

    def _qCurveToOne(self, pt1: Point, pt2: Point) -> None:
        """Draw a single quadratic segment.

        The default implementation elevates the quadratic to the equivalent
        cubic and hands it to _curveToOne(). Override with a native
        implementation where one exists.
        """
        pt0 = self._require_current_point("_qCurveToOne")
        mid1 = pt0.lerp(pt1, 2.0 / 3.0)
        mid2 = pt2.lerp(pt1, 2.0 / 3.0)
        self._curveToOne(mid1, mid2, pt2)

    # Do not override

    def _getCurrentPoint(self) -> Point | None:
        """Return the current point.

        Not part of the public protocol, but useful for subclasses.
        """
        return self._current_point

    def _require_current_point(self, operation: str) -> Point:
        if self._current_point is None:
            raise MissingCurrentPointError(operation)
        return self._current_point

    def moveTo(self, pt: Any) -> None:
        pt = Point.coerce(pt)
        self._moveTo(pt)
        self._current_point = pt

    def lineTo(self, pt: Any) -> None:
        pt = Point.coerce(pt)
        self._require_current_point("lineTo")
        self._lineTo(pt)
        self._current_point = pt

    def curveTo(self, *points: Any) -> None:
        n = len(points) - 1  # number of control points
        if n < 0:
            raise NoPointsError("curveTo")
        if n == 0:
            self.lineTo(points[0])
            return
        if n == 1:
            self.qCurveTo(*points)
            return

        coerced = [Point.coerce(p) for p in points]
        self._require_current_point("curveTo")

        if n == 2:
            # The common case: one plain cubic segment
            self._curveToOne(*coerced)
            self._current_point = coerced[-1]
            return

        logger.debug("Decomposing super Bezier with %d control points", n)
        for pt1, pt2, pt3 in decompose_super_bezier_segment(coerced):
            self._curveToOne(pt1, pt2, pt3)
            self._current_point = pt3

    def qCurveTo(self, *points: Any) -> None:
        run = QuadraticRun.from_points(points)

        if run.closed:
            # A contour without on-curve points: make the implied point
            # between the last and first off-curve points explicit and
            # start the subpath there.
            start = run.implied_start()
            self._moveTo(start)
            self._current_point = start

        explicit = run.explicit_points()
        n = len(explicit) - 1  # number of off-curve points
        if n == 0:
            self.lineTo(explicit[0])
            return

        self._require_current_point("qCurveTo")
        if n > 1:
            logger.debug("Splitting quadratic run of %d off-curve points", n)
        for pt1, pt2 in decompose_quadratic_segment(explicit):
            self._qCurveToOne(pt1, pt2)
            self._current_point = pt2

    def closePath(self) -> None:
        self._closePath()
        self._current_point = None

    def endPath(self) -> None:
        self._endPath()
        self._current_point = None

    def addComponent(self, glyph_name: str, transformation: Any) -> None:
        """Draw a glyph from the glyph set, transformed, onto this pen.

        Args:
            glyph_name: Name of the component glyph
            transformation: fontTools Transform or 6-item sequence

        Raises:
            MissingComponentError: If the glyph is not in the glyph set and
                config.skip_missing_components is False
            ComponentCycleError: If the glyph is already being drawn as one
                of its own components
        """
        from glyphpen.core.filter import TransformPen

        try:
            glyph = self.glyph_set[glyph_name]
        except KeyError:
            if not self.config.skip_missing_components:
                raise MissingComponentError(glyph_name) from None
            logger.warning("Missing component skipped: %s", glyph_name)
            return

        if glyph_name in self._component_stack:
            raise ComponentCycleError([*self._component_stack, glyph_name])

        logger.debug("Drawing component %s", glyph_name)
        self._component_stack.append(glyph_name)
        try:
            glyph.draw(TransformPen(self, transformation))
        finally:
            self._component_stack.pop()
