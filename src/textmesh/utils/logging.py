"""Logging utilities for textmesh."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog


@dataclass
class LayoutStats:
    """Statistics from one update of the layout system."""

    computed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    triangles_emitted: int = 0
    placements_emitted: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate update duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
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

    logger = structlog.get_logger("textmesh")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class LayoutLogger:
    """Logger for tracking layout passes and statistics."""

    def __init__(self, logger: Any) -> None:
        self._logger = logger
        self._stats = LayoutStats()

    def reset(self) -> LayoutStats:
        """Start a new statistics record and return it."""
        self._stats = LayoutStats()
        return self._stats

    def log_source_not_ready(self, source_id: int) -> None:
        """Log a source skipped because its font is not loaded yet."""
        self._logger.debug("Font not loaded, source skipped", source=source_id)
        self._stats.skipped_count += 1

    def log_source_computed(
        self,
        source_id: int,
        triangles: int,
        placements: int,
        duration_ms: float,
    ) -> None:
        """Log a successful layout pass."""
        self._logger.info(
            "Text layout computed",
            source=source_id,
            triangles=triangles,
            placements=placements,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.computed_count += 1
        self._stats.triangles_emitted += triangles
        self._stats.placements_emitted += placements

    def log_font_error(self, source_id: int, error: Exception) -> None:
        """Log a font that could not be parsed for a source."""
        self._logger.warning(
            "Failed to parse font",
            source=source_id,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((str(source_id), str(error)))

    @property
    def stats(self) -> LayoutStats:
        """Get current statistics."""
        return self._stats
