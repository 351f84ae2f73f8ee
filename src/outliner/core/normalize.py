"""Bounding boxes, centering and unit scaling of outlines."""

from collections.abc import Sequence
from dataclasses import dataclass

from outliner.domain import Point, Shape


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def max_dimension(self) -> float:
        """Larger of width and height."""
        return max(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


def bounding_box(points: Sequence[Point]) -> BoundingBox | None:
    """Calculate the bounding box of points.

    Returns:
        BoundingBox, or None for an empty sequence
    """
    if not points:
        return None

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def auto_scale_shape(shape: Shape) -> Shape:
    """Center a shape on the origin and scale its largest dimension to 1.

    Every point becomes (point - box_center) / max(width, height). Scaling is
    uniform so the aspect ratio is kept.

    Args:
        shape: Outline to normalize

    Returns:
        Normalized shape, or the input itself when it is empty or its
        bounding box has zero size
    """
    box = bounding_box(shape.points)
    if box is None:
        return shape

    max_dim = box.max_dimension
    if max_dim == 0:
        return shape

    scale = 1 / max_dim
    center = box.center
    return Shape(
        tuple(Point((p.x - center.x) * scale, (p.y - center.y) * scale) for p in shape.points)
    )


def center_shape(shape: Shape) -> Shape:
    """Translate a shape so its bounding box is centered on the origin.

    Args:
        shape: Outline to center

    Returns:
        Centered shape, or the input itself when it is empty
    """
    box = bounding_box(shape.points)
    if box is None:
        return shape

    center = box.center
    return Shape(tuple(Point(p.x - center.x, p.y - center.y) for p in shape.points))
