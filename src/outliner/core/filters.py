"""Point filters that thin out a traced outline.

Both filters scan the outline as an open path: the first point is always kept
and neither looks across the closing edge. They only remove points, never
reorder or move them.
"""

import logging
from collections.abc import Sequence

from outliner.core.geometry import (
    COLLINEAR_TOLERANCE,
    DUPLICATE_TOLERANCE,
    cross_product,
    point_distance,
)
from outliner.domain import Point

logger = logging.getLogger(__name__)


def remove_duplicate_points(
    points: Sequence[Point],
    tolerance: float = DUPLICATE_TOLERANCE,
) -> list[Point]:
    """Drop points that sit on top of the previously kept point.

    A point is kept only if its distance to the most recently kept point is
    strictly greater than tolerance, so a run of near-identical samples
    collapses to its first member.

    Args:
        points: Points in trace order
        tolerance: Maximum distance still considered a duplicate

    Returns:
        Filtered points; empty and single-point input is returned as a copy
    """
    if not points:
        return list(points)

    result = [points[0]]
    for curr in points[1:]:
        if point_distance(result[-1], curr) > tolerance:
            result.append(curr)

    if len(result) < len(points):
        logger.debug("Removed %d duplicate points", len(points) - len(result))
    return result


def remove_collinear_points(
    points: Sequence[Point],
    tolerance: float = COLLINEAR_TOLERANCE,
) -> list[Point]:
    """Drop interior points lying on the line through their neighbours.

    Each interior point is tested against its original neighbours (not the
    last kept point) using the cross product of (curr - prev) and
    (next - prev). The first and last points are always kept.

    Args:
        points: Points in trace order
        tolerance: Cross-product magnitude at or below which a point is dropped

    Returns:
        Filtered points; input of two or fewer points is returned as a copy
    """
    if len(points) <= 2:
        return list(points)

    result = [points[0]]
    for i in range(1, len(points) - 1):
        if abs(cross_product(points[i - 1], points[i], points[i + 1])) > tolerance:
            result.append(points[i])
    result.append(points[-1])

    if len(result) < len(points):
        logger.debug("Removed %d collinear points", len(points) - len(result))
    return result


def find_corner_index(
    points: Sequence[Point],
    tolerance: float = COLLINEAR_TOLERANCE,
) -> int | None:
    """Index of the first point not collinear with its cyclic neighbours.

    Unlike remove_collinear_points this wraps around, so the first and last
    points are tested against each other.

    Returns:
        Index of the first corner, or None if the loop has fewer than three
        points or is flat everywhere
    """
    n = len(points)
    if n < 3:
        return None

    for i in range(n):
        if abs(cross_product(points[i - 1], points[i], points[(i + 1) % n])) > tolerance:
            return i
    return None
