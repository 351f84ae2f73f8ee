"""Core cleanup algorithms for outliner.

This module contains the core algorithms for:

- Geometry primitives (distances, intersections, cross products)
- Point filtering (duplicates, collinear points)
- Douglas-Peucker polyline simplification
- Outer contour reconstruction by ray sampling
- Bounding box normalization
- Pipeline orchestration per cleanup mode

All stage functions are:
- Stateless
- Pure (inputs are never modified)
- Total (degenerate input passes through instead of raising)

Key functions:
- cleanup_shape: Clean a raw outline with a given mode
- auto_scale_shape: Center and scale an outline to unit size
- douglas_peucker: Simplify an open polyline
- extract_outer_contour: Ray-sample the outer boundary

Key classes:
- ShapeCleaner: Configurable pipeline with stage reporting
- ContourExtractor: Configured ray-sampling extractor
- OutlineSession: Holds the original outline and recomputes on change
"""

from outliner.core.contour import ContourExtractor, extract_outer_contour, find_ray_intersection
from outliner.core.filters import (
    find_corner_index,
    remove_collinear_points,
    remove_duplicate_points,
)
from outliner.core.geometry import (
    COLLINEAR_TOLERANCE,
    DUPLICATE_TOLERANCE,
    PARALLEL_EPSILON,
    SIMPLIFY_TOLERANCE,
    cross_product,
    line_intersection,
    max_radius,
    mean_center,
    point_distance,
    point_to_segment_distance,
)
from outliner.core.normalize import BoundingBox, auto_scale_shape, bounding_box, center_shape
from outliner.core.pipeline import (
    CleanupReport,
    ShapeCleaner,
    aggressive_cleanup,
    cleanup_shape,
    normal_cleanup,
)
from outliner.core.session import OutlineSession
from outliner.core.simplify import douglas_peucker

__all__ = [
    # Tolerances
    "COLLINEAR_TOLERANCE",
    "DUPLICATE_TOLERANCE",
    "PARALLEL_EPSILON",
    "SIMPLIFY_TOLERANCE",
    # Classes
    "BoundingBox",
    "CleanupReport",
    "ContourExtractor",
    "OutlineSession",
    "ShapeCleaner",
    # Functions
    "aggressive_cleanup",
    "auto_scale_shape",
    "bounding_box",
    "center_shape",
    "cleanup_shape",
    "cross_product",
    "douglas_peucker",
    "extract_outer_contour",
    "find_corner_index",
    "find_ray_intersection",
    "line_intersection",
    "max_radius",
    "mean_center",
    "normal_cleanup",
    "point_distance",
    "point_to_segment_distance",
    "remove_collinear_points",
    "remove_duplicate_points",
]
