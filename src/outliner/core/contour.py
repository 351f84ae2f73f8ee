"""Outer contour reconstruction by radial ray sampling.

Self-intersecting or noisy outlines cannot be extruded directly. This module
rebuilds an outer boundary by casting rays from outside the shape toward its
center and keeping the first polygon edge each ray meets. The result is a
star-shaped approximation of the outline as seen from its mean point.

Key components:
- find_ray_intersection: Nearest edge hit along one inward ray
- extract_outer_contour: Sample the full boundary
- ContourExtractor: Configured extractor with miss reporting
"""

import logging
import math
from collections.abc import Sequence

from outliner.config import ContourConfig
from outliner.core.geometry import (
    PARALLEL_EPSILON,
    line_intersection,
    max_radius,
    mean_center,
    point_distance,
)
from outliner.domain import Point

logger = logging.getLogger(__name__)

DEFAULT_RAY_COUNT = 360
DEFAULT_RAY_START_FACTOR = 1.5


def find_ray_intersection(
    ray_start: Point,
    ray_end: Point,
    polygon: Sequence[Point],
    epsilon: float = PARALLEL_EPSILON,
) -> Point | None:
    """Find the polygon edge hit nearest to the start of a ray.

    Every edge i connects polygon[i] to polygon[(i + 1) % n], so the loop is
    closed here even though outlines never store the closing point. Hits
    behind the ray start are rejected; the first edge wins distance ties.

    Args:
        ray_start: Origin of the ray
        ray_end: Point the ray is aimed at
        polygon: Outline vertices
        epsilon: Parallel-line threshold passed to line_intersection

    Returns:
        Nearest hit, or None if the ray meets no edge
    """
    direction_x = ray_end.x - ray_start.x
    direction_y = ray_end.y - ray_start.y

    closest: Point | None = None
    closest_distance = math.inf

    n = len(polygon)
    for i in range(n):
        hit = line_intersection(ray_start, ray_end, polygon[i], polygon[(i + 1) % n], epsilon)
        if hit is None:
            continue

        # Must lie in the direction the ray travels
        dot = direction_x * (hit.x - ray_start.x) + direction_y * (hit.y - ray_start.y)
        if dot < 0:
            continue

        distance = point_distance(ray_start, hit)
        if distance < closest_distance:
            closest_distance = distance
            closest = hit

    return closest


def extract_outer_contour(
    points: Sequence[Point],
    ray_count: int = DEFAULT_RAY_COUNT,
    start_factor: float = DEFAULT_RAY_START_FACTOR,
    epsilon: float = PARALLEL_EPSILON,
) -> list[Point]:
    """Sample the outer boundary of an outline with inward rays.

    Rays are cast at equal angular steps over a full turn, starting at
    start_factor times the max radius from the mean center and aimed at the
    center. Each ray contributes its nearest edge hit, in angle order. Rays
    that hit nothing contribute nothing, so the result can have fewer than
    ray_count points.

    Args:
        points: Outline vertices
        ray_count: Number of rays over a full turn
        start_factor: Ray start distance relative to the max radius
        epsilon: Parallel-line threshold

    Returns:
        Contour points; input with fewer than three points is returned as a copy
    """
    if len(points) < 3:
        return list(points)

    center = mean_center(points)
    start_radius = max_radius(points, center) * start_factor

    contour: list[Point] = []
    for i in range(ray_count):
        angle = (i / ray_count) * math.pi * 2
        ray_start = Point(
            center.x + math.cos(angle) * start_radius,
            center.y + math.sin(angle) * start_radius,
        )
        hit = find_ray_intersection(ray_start, center, points, epsilon)
        if hit is not None:
            contour.append(hit)

    return contour


class ContourExtractor:
    """Ray-sampling contour extractor driven by configuration.

    Example:
        extractor = ContourExtractor(ContourConfig(ray_count=720))
        contour = extractor.extract(points)
    """

    def __init__(
        self,
        config: ContourConfig | None = None,
        epsilon: float = PARALLEL_EPSILON,
    ) -> None:
        """Initialize extractor.

        Args:
            config: Ray sampling settings (defaults used if None)
            epsilon: Parallel-line threshold
        """
        self.config = config or ContourConfig()
        self.epsilon = epsilon

    def extract(self, points: Sequence[Point]) -> list[Point]:
        """Extract the outer contour of points.

        Args:
            points: Outline vertices

        Returns:
            Contour points in ray-angle order
        """
        if len(points) < 3:
            logger.debug("Skipping contour extraction for %d points", len(points))
            return list(points)

        contour = extract_outer_contour(
            points,
            ray_count=self.config.ray_count,
            start_factor=self.config.ray_start_factor,
            epsilon=self.epsilon,
        )

        missed = self.config.ray_count - len(contour)
        if missed:
            logger.debug(
                "Contour extraction: %d of %d rays missed the outline",
                missed,
                self.config.ray_count,
            )
        return contour
