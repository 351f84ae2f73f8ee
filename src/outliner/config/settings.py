"""Configuration settings for Outliner."""

from enum import IntEnum
from pathlib import Path

from pydantic import BaseModel, Field

from outliner.exceptions import InvalidCleanupModeError


class CleanupMode(IntEnum):
    """Cleanup strategy applied to a traced outline."""

    NONE = 0
    NORMAL = 1
    AGGRESSIVE = 2

    @property
    def label(self) -> str:
        """Lowercase name used in files and on the command line."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: "CleanupMode | int | str") -> "CleanupMode":
        """Resolve a mode from an enum member, its integer value or its name.

        Args:
            value: CleanupMode, 0-2, or a case-insensitive name ("aggressive")

        Returns:
            Matching CleanupMode

        Raises:
            InvalidCleanupModeError: If value names no mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidCleanupModeError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidCleanupModeError(value) from None
        if isinstance(value, str):
            text = value.strip()
            try:
                return cls(int(text)) if text.isdigit() else cls[text.upper()]
            except (KeyError, ValueError):
                raise InvalidCleanupModeError(value) from None
        raise InvalidCleanupModeError(value)


class ToleranceConfig(BaseModel):
    """Tolerances used by the cleanup stages.

    Defaults match the constants in ``outliner.core.geometry`` so that a
    default-configured cleaner behaves exactly like ``cleanup_shape``.
    """

    duplicate_tolerance: float = Field(
        default=1e-4,
        gt=0.0,
        le=1.0,
        description="Distance at or below which consecutive points are duplicates",
    )
    collinear_tolerance: float = Field(
        default=1e-3,
        gt=0.0,
        le=1.0,
        description="Cross-product magnitude at or below which a point is collinear",
    )
    simplify_tolerance: float = Field(
        default=1e-3,
        gt=0.0,
        le=1.0,
        description="Douglas-Peucker chord distance tolerance",
    )
    parallel_epsilon: float = Field(
        default=1e-10,
        gt=0.0,
        le=1e-3,
        description="Determinant magnitude below which lines count as parallel",
    )


class ContourConfig(BaseModel):
    """Configuration for ray-sampled outer contour extraction."""

    ray_count: int = Field(
        default=360,
        ge=8,
        le=3600,
        description="Number of rays cast over a full turn",
    )
    ray_start_factor: float = Field(
        default=1.5,
        gt=1.0,
        le=10.0,
        description="Ray start distance as a multiple of the shape's max radius",
    )


class CleanupConfig(BaseModel):
    """Configuration for the cleanup pipeline."""

    mode: CleanupMode = Field(
        default=CleanupMode.NORMAL,
        description="Cleanup strategy",
    )
    auto_scale: bool = Field(
        default=True,
        description="Center and scale the result so its largest dimension is 1",
    )
    rotate_seam: bool = Field(
        default=False,
        description="Start the loop at a corner so the closing edge can be simplified",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class OutlinerSettings(BaseModel):
    """Main application settings."""

    cleanup: CleanupConfig = Field(default_factory=CleanupConfig)
    tolerances: ToleranceConfig = Field(default_factory=ToleranceConfig)
    contour: ContourConfig = Field(default_factory=ContourConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> OutlinerSettings:
    """Get default application settings."""
    return OutlinerSettings()
