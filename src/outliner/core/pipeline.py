"""Cleanup pipeline orchestration.

This module composes the cleanup stages according to a CleanupMode:

- NONE: the raw outline is returned untouched
- NORMAL: deduplicate, drop collinear points, Douglas-Peucker simplify
- AGGRESSIVE: NORMAL, rebuild the outer contour by ray sampling, NORMAL again

Key components:
- cleanup_shape: Pure dispatch using the default tolerances
- ShapeCleaner: Configurable pipeline with per-stage reporting and scaling

cleanup_shape returns the outline unscaled. Apply auto_scale_shape afterwards
or use ShapeCleaner.process.
"""

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import structlog

from outliner.config import CleanupMode, OutlinerSettings, get_default_settings
from outliner.core.contour import ContourExtractor, extract_outer_contour
from outliner.core.filters import (
    find_corner_index,
    remove_collinear_points,
    remove_duplicate_points,
)
from outliner.core.geometry import SIMPLIFY_TOLERANCE, point_distance
from outliner.core.normalize import auto_scale_shape
from outliner.core.simplify import douglas_peucker
from outliner.domain import Point, Shape
from outliner.utils import CleanupLogger


def normal_cleanup(shape: Shape) -> Shape:
    """Deduplicate, drop collinear points and simplify with default tolerances."""
    if shape.is_empty():
        return shape

    deduped = remove_duplicate_points(shape.points)
    filtered = remove_collinear_points(deduped)
    return Shape.from_points(douglas_peucker(filtered, SIMPLIFY_TOLERANCE))


def aggressive_cleanup(shape: Shape) -> Shape:
    """Normal cleanup around a ray-sampled outer contour rebuild."""
    if shape.is_empty():
        return shape

    cleaned = normal_cleanup(shape)
    contour = extract_outer_contour(cleaned.points)
    return normal_cleanup(Shape.from_points(contour))


def _no_cleanup(shape: Shape) -> Shape:
    return shape


_CLEANUP_FUNCTIONS: dict[CleanupMode, Callable[[Shape], Shape]] = {
    CleanupMode.NONE: _no_cleanup,
    CleanupMode.NORMAL: normal_cleanup,
    CleanupMode.AGGRESSIVE: aggressive_cleanup,
}


def cleanup_shape(raw: Shape, mode: CleanupMode | int | str) -> Shape:
    """Clean a raw outline with the given mode.

    Always pass the original traced outline; re-cleaning an already cleaned
    result compounds the loss of detail.

    Args:
        raw: Outline as produced by the tracer
        mode: CleanupMode, its integer value or its name

    Returns:
        Cleaned outline (not scaled)

    Raises:
        InvalidCleanupModeError: If mode names no cleanup mode
    """
    return _CLEANUP_FUNCTIONS[CleanupMode.parse(mode)](raw)


@dataclass
class CleanupReport:
    """Point counts recorded during one cleanup run.

    Attributes:
        mode: Mode that was applied
        input_count: Points in the raw outline
        stages: (stage name, points after stage) in execution order
        output_count: Points in the final outline
        scaled: Whether the result was normalized
        duration_ms: Wall time of the run
    """

    mode: CleanupMode
    input_count: int
    stages: list[tuple[str, int]] = field(default_factory=list)
    output_count: int = 0
    scaled: bool = False
    duration_ms: float = 0.0


class ShapeCleaner:
    """Runs the cleanup pipeline with configured tolerances.

    With default settings the cleaned outline is identical to cleanup_shape.
    When ``cleanup.rotate_seam`` is enabled, each normal pass starts the loop
    at its first corner and temporarily closes it, so a vertex left in the
    middle of the closing edge can be removed like any other.

    Example:
        cleaner = ShapeCleaner(OutlinerSettings())
        final, report = cleaner.process(raw, CleanupMode.AGGRESSIVE)
    """

    def __init__(
        self,
        settings: OutlinerSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize cleaner.

        Args:
            settings: Application settings (defaults used if None)
            logger: Structured logger (the "outliner" logger if None)
        """
        self.settings = settings or get_default_settings()
        self.logger = logger or structlog.get_logger("outliner")
        self.cleanup_logger = CleanupLogger(self.logger)
        self.extractor = ContourExtractor(
            self.settings.contour,
            epsilon=self.settings.tolerances.parallel_epsilon,
        )

    def clean(
        self,
        raw: Shape,
        mode: CleanupMode | int | str | None = None,
    ) -> tuple[Shape, CleanupReport]:
        """Clean a raw outline without scaling it.

        Args:
            raw: Outline as produced by the tracer
            mode: Mode override (configured mode if None)

        Returns:
            Tuple of (cleaned shape, report)

        Raises:
            InvalidCleanupModeError: If mode names no cleanup mode
        """
        resolved = self.settings.cleanup.mode if mode is None else CleanupMode.parse(mode)
        report = CleanupReport(mode=resolved, input_count=len(raw))
        start_time = time.time()

        self.cleanup_logger.log_shape_start(resolved.label, len(raw))

        if resolved is CleanupMode.NONE or raw.is_empty():
            result = raw
        elif resolved is CleanupMode.NORMAL:
            result = Shape.from_points(self._normal_pass(raw.points, report, ""))
        else:
            cleaned = self._normal_pass(raw.points, report, "")
            if len(cleaned) < 3:
                self.cleanup_logger.log_degenerate("too few points for contour", len(cleaned))
            contour = self.extractor.extract(cleaned)
            self._record(report, "contour", len(cleaned), len(contour))
            result = Shape.from_points(self._normal_pass(contour, report, "contour."))

        report.output_count = len(result)
        report.duration_ms = (time.time() - start_time) * 1000
        self.cleanup_logger.log_shape_complete(
            resolved.label, report.input_count, report.output_count, report.duration_ms
        )
        return result, report

    def process(
        self,
        raw: Shape,
        mode: CleanupMode | int | str | None = None,
    ) -> tuple[Shape, CleanupReport]:
        """Clean a raw outline and normalize it if auto scaling is enabled.

        Args:
            raw: Outline as produced by the tracer
            mode: Mode override (configured mode if None)

        Returns:
            Tuple of (final shape, report)
        """
        cleaned, report = self.clean(raw, mode)
        if not self.settings.cleanup.auto_scale:
            return cleaned, report

        scaled = auto_scale_shape(cleaned)
        report.scaled = scaled is not cleaned
        if not report.scaled and not cleaned.is_empty():
            self.cleanup_logger.log_degenerate("zero-size bounding box", len(cleaned))
        return scaled, report

    def _normal_pass(
        self,
        points: Sequence[Point],
        report: CleanupReport,
        prefix: str,
    ) -> list[Point]:
        """Run dedup, collinear filter and simplification once."""
        tolerances = self.settings.tolerances

        if not points:
            return []

        deduped = remove_duplicate_points(points, tolerances.duplicate_tolerance)
        self._record(report, f"{prefix}dedup", len(points), len(deduped))

        if self.settings.cleanup.rotate_seam:
            loop, closed = self._close_at_corner(deduped)
        else:
            loop, closed = deduped, False

        filtered = remove_collinear_points(loop, tolerances.collinear_tolerance)
        simplified = douglas_peucker(filtered, tolerances.simplify_tolerance)

        if closed and len(simplified) > 2:
            # Drop the repeated corner appended by _close_at_corner
            filtered, simplified = filtered[:-1], simplified[:-1]
        elif closed:
            filtered = remove_collinear_points(deduped, tolerances.collinear_tolerance)
            simplified = douglas_peucker(filtered, tolerances.simplify_tolerance)

        self._record(report, f"{prefix}collinear", len(deduped), len(filtered))
        self._record(report, f"{prefix}simplify", len(filtered), len(simplified))
        return simplified

    def _close_at_corner(self, points: list[Point]) -> tuple[list[Point], bool]:
        """Rotate the loop to start at a corner and repeat that corner at the end.

        Returns:
            Tuple of (points, closed); the points are unchanged and closed is
            False when the loop has no corner
        """
        tolerances = self.settings.tolerances

        loop = list(points)
        if len(loop) > 1 and point_distance(loop[-1], loop[0]) <= tolerances.duplicate_tolerance:
            loop = loop[:-1]

        corner = find_corner_index(loop, tolerances.collinear_tolerance)
        if corner is None:
            return points, False

        rotated = loop[corner:] + loop[:corner]
        return rotated + [rotated[0]], True

    def _record(self, report: CleanupReport, stage: str, before: int, after: int) -> None:
        report.stages.append((stage, after))
        self.cleanup_logger.log_stage(stage, before, after)
