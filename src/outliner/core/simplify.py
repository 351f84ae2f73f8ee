"""Douglas-Peucker polyline simplification."""

from collections.abc import Sequence

from outliner.core.geometry import SIMPLIFY_TOLERANCE, point_to_segment_distance
from outliner.domain import Point


def douglas_peucker(
    points: Sequence[Point],
    tolerance: float = SIMPLIFY_TOLERANCE,
) -> list[Point]:
    """Simplify an open polyline by recursive chord splitting.

    Finds the interior point farthest from the chord between the first and
    last points. The earliest index wins ties. If that distance exceeds
    tolerance the polyline is split there and both halves are simplified;
    otherwise the whole span collapses to its endpoints.

    The literal first and last points are always preserved, and a closed
    outline is treated as an open path between them.

    Args:
        points: Polyline vertices in order
        tolerance: Maximum distance a dropped point may lie from its chord

    Returns:
        Simplified polyline; input of two or fewer points is returned as a copy

    Examples:
        >>> pts = [Point(0.0, 0.0), Point(1.0, 0.0005), Point(2.0, 0.0)]
        >>> douglas_peucker(pts, 0.001)
        [Point(x=0.0, y=0.0), Point(x=2.0, y=0.0)]
    """
    if len(points) <= 2:
        return list(points)

    start = points[0]
    end = points[-1]

    max_distance = 0.0
    max_index = 0
    for i in range(1, len(points) - 1):
        distance = point_to_segment_distance(points[i], start, end)
        if distance > max_distance:
            max_distance = distance
            max_index = i

    if max_distance > tolerance:
        left = douglas_peucker(points[: max_index + 1], tolerance)
        right = douglas_peucker(points[max_index:], tolerance)
        # Junction point appears at the end of left and the start of right
        return left[:-1] + right

    return [start, end]
