"""Logging utilities for Planegeom."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class RunStats:
    """Counters for a command run."""

    shapes_drawn: int = 0
    intersections: int = 0
    degenerate_results: int = 0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging over the standard library.

    Core modules log through logging.getLogger(__name__); this routes those
    records to the console and, if requested, to a file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_planegeom", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._planegeom = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    level = "ERROR" if quiet else console_level
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._planegeom = True  # type: ignore[attr-defined]
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

    logger = structlog.get_logger("planegeom")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class RunLogger:
    """Logger for tracking command progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RunStats()

    def log_shape_drawn(self, kind: str) -> None:
        self._logger.debug("Shape drawn", kind=kind)
        self._stats.shapes_drawn += 1

    def log_intersection(self, first: str, second: str, status: str, points: int) -> None:
        """Log an intersection query and its outcome."""
        self._logger.info(
            "Intersection computed",
            first=first,
            second=second,
            status=status,
            points=points,
        )
        self._stats.intersections += 1

    def log_degenerate(self, operation: str, reason: str) -> None:
        """Log an operation that produced an empty or sentinel result."""
        self._logger.warning("Degenerate result", operation=operation, reason=reason)
        self._stats.degenerate_results += 1

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
