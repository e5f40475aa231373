"""Segment decomposition for multi-point curves.

Pens only ever draw two primitive curve shapes: a cubic segment with two
control points and a quadratic segment with one. Outline sources may emit
longer runs of control points in a single call; the functions here split
such runs into primitive segments.

Both functions take the points *after* the current point: the start of the
curve is tracked by the caller and is never part of the input.

All functions are pure and stateless.
"""

from collections.abc import Sequence

from glyphpen.domain import Point
from glyphpen.exceptions import NotEnoughPointsError


def decompose_super_bezier_segment(
    points: Sequence[Point],
) -> list[tuple[Point, Point, Point]]:
    """Split a super Bezier into regular cubic Bezier segments.

    A super Bezier is a PostScript-style curve with more than two control
    points. With n control points (len(points) - 1) the curve is drawn as
    n - 1 cubic segments. New on-curve joints are placed between
    interpolated control points so that consecutive segments meet with
    continuous tangents, much like NURB splines and TrueType implied points.

    Args:
        points: Control points followed by the on-curve destination;
            at least 3 points

    Returns:
        List of (pt1, pt2, pt3) tuples, each one regular curveTo segment

    Raises:
        NotEnoughPointsError: If fewer than 3 points are given

    Examples:
        >>> segments = decompose_super_bezier_segment(
        ...     [Point(0, 0), Point(10, 10), Point(20, 10), Point(20, 0)]
        ... )
        >>> len(segments)
        2
        >>> segments[0][2]
        Point(x=10.0, y=7.5)
    """
    n = len(points) - 1
    if n < 2:
        raise NotEnoughPointsError("decompose_super_bezier_segment", 3, len(points))

    segments: list[tuple[Point, Point, Point]] = []
    pt1 = points[0]
    pt2: Point | None = None

    for i in range(2, n + 1):
        # Fewer divisions near both ends of the run, up to 3 in the middle
        n_divisions = min(i, 3, n - i + 2)
        for j in range(1, n_divisions):
            temp = points[i - 2].lerp(points[i - 1], j / n_divisions)
            if pt2 is None:
                pt2 = temp
            else:
                pt3 = pt2.midpoint(temp)
                segments.append((pt1, pt2, pt3))
                pt1 = temp
                pt2 = None

    segments.append((pt1, points[-2], points[-1]))
    return segments


def decompose_quadratic_segment(points: Sequence[Point]) -> list[tuple[Point, Point]]:
    """Split a run of quadratic off-curve points into atomic segments.

    Between any two consecutive off-curve points there is an implied
    on-curve point exactly halfway between them. With n off-curve points
    (len(points) - 1) the run becomes n quadratic segments.

    Args:
        points: Off-curve points followed by the on-curve destination;
            at least 2 points

    Returns:
        List of (pt1, pt2) tuples, each one plain quadratic segment

    Raises:
        NotEnoughPointsError: If fewer than 2 points are given

    Examples:
        >>> decompose_quadratic_segment([Point(0, 10), Point(10, 10), Point(10, 0)])
        [(Point(x=0, y=10), Point(x=5.0, y=10.0)), (Point(x=10, y=10), Point(x=10, y=0))]
    """
    n = len(points) - 1
    if n < 1:
        raise NotEnoughPointsError("decompose_quadratic_segment", 2, len(points))

    segments: list[tuple[Point, Point]] = []
    for i in range(n - 1):
        implied = points[i].midpoint(points[i + 1])
        segments.append((points[i], implied))

    segments.append((points[-2], points[-1]))
    return segments
