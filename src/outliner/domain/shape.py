"""Core geometric types for outline representation.

This module defines the fundamental types used throughout outliner:
- Point: An immutable 2D point
- Shape: An immutable closed loop of points
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Shape:
    """A closed outline stored as an ordered sequence of points.

    The closing edge from the last point back to the first is implicit and is
    never stored as a repeated point. Shapes are never modified in place;
    every cleanup stage builds a new one.

    Attributes:
        points: Points of the loop in trace order
    """

    points: tuple[Point, ...] = ()

    @classmethod
    def from_points(cls, points: Iterable["Point | tuple[float, float]"]) -> "Shape":
        """Build a shape from points or (x, y) pairs.

        Args:
            points: Points in trace order

        Returns:
            Shape holding the points in the same order
        """
        return cls(
            tuple(p if isinstance(p, Point) else Point(float(p[0]), float(p[1])) for p in points)
        )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_empty(self) -> bool:
        """Check if shape has no points."""
        return not self.points

    def to_tuples(self) -> list[tuple[float, float]]:
        """Points as a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]
