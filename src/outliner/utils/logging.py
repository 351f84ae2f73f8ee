"""Logging utilities for Outliner."""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class CleanupStats:
    """Statistics from cleanup runs."""

    shapes_processed: int = 0
    degenerate_count: int = 0
    points_in: int = 0
    points_out: int = 0
    stage_counts: list[tuple[str, int]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def points_removed(self) -> int:
        return self.points_in - self.points_out


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"outliner_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("outliner")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class CleanupLogger:
    """Logger for tracking cleanup stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CleanupStats()

    def log_shape_start(self, mode: str, point_count: int) -> None:
        """Log start of a cleanup run."""
        if self._stats.start_time is None:
            self._stats.start_time = time.time()
        self._logger.debug("Cleaning shape", mode=mode, points=point_count)

    def log_stage(self, stage: str, before: int, after: int) -> None:
        """Log point counts around one pipeline stage."""
        self._logger.debug("Stage complete", stage=stage, before=before, after=after)
        self._stats.stage_counts.append((stage, after))

    def log_shape_complete(
        self,
        mode: str,
        input_count: int,
        output_count: int,
        duration_ms: float,
    ) -> None:
        """Log finished cleanup run."""
        self._logger.info(
            "Shape cleaned",
            mode=mode,
            input_points=input_count,
            output_points=output_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.shapes_processed += 1
        self._stats.points_in += input_count
        self._stats.points_out += output_count
        self._stats.end_time = time.time()

    def log_degenerate(self, reason: str, point_count: int) -> None:
        """Log a shape that passed through a stage unchanged."""
        self._logger.debug("Degenerate shape", reason=reason, points=point_count)
        self._stats.degenerate_count += 1

    @property
    def stats(self) -> CleanupStats:
        """Get current cleanup statistics."""
        return self._stats
