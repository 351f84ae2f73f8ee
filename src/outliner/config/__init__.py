"""Configuration management for outliner.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CleanupMode: Cleanup strategy (none, normal, aggressive)
- ToleranceConfig: Tolerances for each cleanup stage
- ContourConfig: Ray sampling settings
- CleanupConfig: Pipeline settings
- LoggingConfig: Logging settings
- OutlinerSettings: Main application settings
"""

from outliner.config.settings import (
    CleanupConfig,
    CleanupMode,
    ContourConfig,
    LoggingConfig,
    OutlinerSettings,
    ToleranceConfig,
    get_default_settings,
)

__all__ = [
    "CleanupConfig",
    "CleanupMode",
    "ContourConfig",
    "LoggingConfig",
    "OutlinerSettings",
    "ToleranceConfig",
    "get_default_settings",
]
