"""Outline document model and conversion to domain shapes.

Outline files are JSON. Two layouts are accepted on input:

- a bare list of [x, y] pairs
- an object {"points": [[x, y], ...], "mode": "normal"} where mode is optional

Written files always use the object layout.
"""

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from outliner.config import CleanupMode
from outliner.domain import Shape
from outliner.exceptions import InvalidCleanupModeError, OutlineFormatError


class OutlineDocument(BaseModel):
    """Validated content of an outline file."""

    points: list[tuple[float, float]] = Field(
        default_factory=list,
        description="Outline vertices in trace order",
    )
    mode: CleanupMode | None = Field(
        default=None,
        description="Cleanup mode that produced the points, if any",
    )
    generated: datetime | None = Field(
        default=None,
        description="When the file was written",
    )

    @field_validator("points")
    @classmethod
    def check_finite(cls, points: list[tuple[float, float]]) -> list[tuple[float, float]]:
        for index, (x, y) in enumerate(points):
            if not (math.isfinite(x) and math.isfinite(y)):
                raise ValueError(f"point {index} has a non-finite coordinate ({x}, {y})")
        return points

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, value: Any) -> CleanupMode | None:
        if value is None:
            return None
        try:
            return CleanupMode.parse(value)
        except InvalidCleanupModeError as e:
            raise ValueError(str(e)) from e

    @field_serializer("mode")
    def serialize_mode(self, mode: CleanupMode | None) -> str | None:
        return mode.label if mode is not None else None


def parse_outline_document(data: Any, path: str) -> OutlineDocument:
    """Validate decoded JSON as an outline document.

    Args:
        data: Decoded JSON value
        path: Source path, used in error messages

    Returns:
        Validated document

    Raises:
        OutlineFormatError: If the data is not a valid outline
    """
    if isinstance(data, list):
        data = {"points": data}

    try:
        return OutlineDocument.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'document'}: {err['msg']}"
            for err in e.errors()
        )
        raise OutlineFormatError(path, details) from e


def document_to_shape(document: OutlineDocument) -> Shape:
    """Convert a validated document to a domain shape."""
    return Shape.from_points(document.points)


def shape_to_document(
    shape: Shape,
    mode: CleanupMode | None = None,
    generated: datetime | None = None,
) -> OutlineDocument:
    """Convert a domain shape to a document ready to be written."""
    return OutlineDocument(points=shape.to_tuples(), mode=mode, generated=generated)
