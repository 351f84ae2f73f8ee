"""Domain models for outliner.

This module contains the core domain models representing traced outlines.
All models are immutable (frozen dataclasses) so cleanup stages can share
input data without copying it.

Key classes:
- Point: A 2D point
- Shape: A closed outline made of points
"""

from outliner.domain.shape import Point, Shape

__all__: list[str] = [
    "Point",
    "Shape",
]
