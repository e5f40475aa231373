"""Core geometric types for pen drawing.

This module defines the fundamental geometric values exchanged by pens:
- Point: An immutable 2D coordinate
- ImpliedOnCurve: Marker for the absent on-curve point of a quadratic run
- QuadraticRun: The validated point list of a qCurveTo call
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from glyphpen.exceptions import (
    InvalidPointError,
    LastOrFirstOffCurveIsNoneError,
    NoPointsError,
)


class Point(NamedTuple):
    """A point in 2D space.

    Immutable and compared by value. Being a tuple, a Point unpacks and
    compares like the plain ``(x, y)`` pairs used by other pen libraries.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: float
    y: float

    @classmethod
    def coerce(cls, value: Any) -> "Point":
        """Build a Point from a Point or any (x, y) sequence.

        Args:
            value: Point, tuple or other 2-item sequence of numbers

        Returns:
            Point with float coordinates

        Raises:
            InvalidPointError: If value is not a pair of finite numbers
        """
        try:
            x, y = value
            x, y = float(x), float(y)
        except (TypeError, ValueError) as e:
            raise InvalidPointError(value) from e
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidPointError(value)
        return cls(x, y)

    def lerp(self, other: "Point", factor: float) -> "Point":
        """Interpolate linearly towards another point.

        Args:
            other: Target point
            factor: 0.0 returns self, 1.0 returns other

        Returns:
            Interpolated point
        """
        return Point(
            self.x + factor * (other.x - self.x),
            self.y + factor * (other.y - self.y),
        )

    def midpoint(self, other: "Point") -> "Point":
        """Return the point halfway between self and other."""
        return Point(0.5 * (self.x + other.x), 0.5 * (self.y + other.y))


class ImpliedOnCurve(Enum):
    """Marker for a quadratic run whose on-curve point is implied.

    TrueType allows contours made only of off-curve points. In a qCurveTo
    call such a contour is written with this marker (or None) in place of
    the final on-curve point.
    """

    TOKEN = "implied"

    def __repr__(self) -> str:
        return "IMPLIED"


IMPLIED = ImpliedOnCurve.TOKEN


def is_implied(value: Any) -> bool:
    """Check whether a qCurveTo argument stands for an implied on-curve point."""
    return value is None or value is IMPLIED


@dataclass(frozen=True, slots=True)
class QuadraticRun:
    """The points of one qCurveTo call, with absent-point handling resolved.

    Only the last point of a run may be absent. A run whose last point is
    absent is ``closed``: it describes a whole contour of off-curve points
    and starts at the midpoint of its last and first off-curve points.

    Attributes:
        points: Explicit points in drawing order
        closed: True when the terminal on-curve point was implied
    """

    points: tuple[Point, ...]
    closed: bool = False

    @classmethod
    def from_points(cls, points: Sequence[Any]) -> "QuadraticRun":
        """Validate the raw arguments of a qCurveTo call.

        Args:
            points: Off-curve points, then an on-curve point or IMPLIED/None

        Returns:
            QuadraticRun instance

        Raises:
            NoPointsError: If points is empty
            LastOrFirstOffCurveIsNoneError: If an absent point appears anywhere
                but last, or an implied run has no off-curve points
        """
        if len(points) == 0:
            raise NoPointsError("qCurveTo")

        closed = is_implied(points[-1])
        explicit = points[:-1] if closed else points

        if closed and len(explicit) == 0:
            raise LastOrFirstOffCurveIsNoneError(
                "an implied on-curve point needs at least one off-curve point"
            )
        for index, value in enumerate(explicit):
            if is_implied(value):
                raise LastOrFirstOffCurveIsNoneError(
                    f"only the last point may be absent, found one at index {index}"
                )

        return cls(points=tuple(Point.coerce(p) for p in explicit), closed=closed)

    def implied_start(self) -> Point | None:
        """Return the implied on-curve start point, or None for open runs."""
        if not self.closed:
            return None
        return self.points[-1].midpoint(self.points[0])

    def explicit_points(self) -> tuple[Point, ...]:
        """Return the run with any implied on-curve point made explicit.

        For a closed run the implied start point is appended, so the run
        ends where it began.
        """
        start = self.implied_start()
        if start is None:
            return self.points
        return (*self.points, start)
