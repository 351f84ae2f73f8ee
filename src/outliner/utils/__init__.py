"""Utility functions for outliner.

This module provides utility functions including:

- Structured logging setup and configuration
- Cleanup statistics tracking
"""

from outliner.utils.logging import (
    CleanupLogger,
    CleanupStats,
    configure_logging,
)

__all__ = [
    "CleanupLogger",
    "CleanupStats",
    "configure_logging",
]
