"""Geometric primitives for outline cleanup.

This module provides the core mathematical utilities for:
- Point and point-to-segment distances
- Line intersection against a bounded segment
- Cross products for collinearity tests
- Center and radius of a point cloud

All functions are pure and stateless. None of them raise for degenerate
input: zero-length segments and parallel lines have defined results.
"""

import math
from collections.abc import Sequence

from outliner.domain import Point

# Default tolerances shared by the cleanup stages
DUPLICATE_TOLERANCE = 1e-4
COLLINEAR_TOLERANCE = 1e-3
SIMPLIFY_TOLERANCE = 1e-3
PARALLEL_EPSILON = 1e-10


def point_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def point_to_segment_distance(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to the closest point of a line segment.

    Projects the point onto the line through the segment and clamps the
    projection parameter to [0, 1], so points beyond either end measure to
    the nearest endpoint.

    Args:
        point: The point to measure from
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Euclidean distance. A zero-length segment gives the distance to
        seg_start.

    Examples:
        >>> point_to_segment_distance(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
        >>> point_to_segment_distance(Point(5.0, 0.0), Point(0.0, 0.0), Point(2.0, 0.0))
        3.0
    """
    a = point.x - seg_start.x
    b = point.y - seg_start.y
    c = seg_end.x - seg_start.x
    d = seg_end.y - seg_start.y

    length_sq = c * c + d * d
    if length_sq == 0:
        return math.sqrt(a * a + b * b)

    t = (a * c + b * d) / length_sq

    if t < 0:
        nearest_x, nearest_y = seg_start.x, seg_start.y
    elif t > 1:
        nearest_x, nearest_y = seg_end.x, seg_end.y
    else:
        nearest_x = seg_start.x + t * c
        nearest_y = seg_start.y + t * d

    dx = point.x - nearest_x
    dy = point.y - nearest_y
    return math.sqrt(dx * dx + dy * dy)


def line_intersection(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
    epsilon: float = PARALLEL_EPSILON,
) -> Point | None:
    """Intersect the infinite line p1-p2 with the segment p3-p4.

    Only the second pair is treated as a bounded segment; the first line's
    parameter is unrestricted so it can serve as a ray.

    Args:
        p1: First point on line 1
        p2: Second point on line 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2
        epsilon: Determinant magnitude below which the lines are parallel

    Returns:
        Intersection point, or None if the lines are parallel or the
        intersection falls outside segment 2

    Examples:
        >>> line_intersection(Point(0.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0), Point(2.0, 0.0))
        Point(x=1.0, y=1.0)
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Parallel or coincident
    if abs(denom) < epsilon:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0 <= u <= 1:
        return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))

    return None


def cross_product(origin: Point, a: Point, b: Point) -> float:
    """2D cross product of (a - origin) and (b - origin).

    Zero when the three points lie on one line; the magnitude is twice the
    area of the triangle they span.
    """
    return (a.x - origin.x) * (b.y - origin.y) - (b.x - origin.x) * (a.y - origin.y)


def mean_center(points: Sequence[Point]) -> Point:
    """Arithmetic mean of the points (not an area-weighted centroid).

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute center of an empty point list")

    sum_x = 0.0
    sum_y = 0.0
    for p in points:
        sum_x += p.x
        sum_y += p.y
    return Point(sum_x / len(points), sum_y / len(points))


def max_radius(points: Sequence[Point], center: Point) -> float:
    """Greatest distance from center to any of the points."""
    radius = 0.0
    for p in points:
        radius = max(radius, point_distance(center, p))
    return radius
