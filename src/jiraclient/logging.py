"""Logging configuration for jiraclient.

As a library, jiraclient only attaches a NullHandler until the application
asks for output with configure_logging(). Once configured it provides:
- Console output on stderr
- Error/debug logs: <log_dir>/jiraclient.log
- Performance logs: <log_dir>/performance.log (one line per request)
"""

import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# Log files
MAIN_LOG_NAME = "jiraclient.log"
PERFORMANCE_LOG_NAME = "performance.log"

# Loggers
_main_logger: logging.Logger | None = None
_perf_logger: logging.Logger | None = None


def get_logger(name: str = "jiraclient") -> logging.Logger:
    """Get a logger in the jiraclient hierarchy.

    Args:
        name: Logger name (usually module name).

    Returns:
        Logger instance.
    """
    global _main_logger

    if _main_logger is None:
        _main_logger = logging.getLogger("jiraclient")
        _main_logger.addHandler(logging.NullHandler())

    return logging.getLogger(f"jiraclient.{name}" if name != "jiraclient" else "jiraclient")


def get_performance_logger() -> logging.Logger:
    """Get the performance logger.

    Performance logs are one-line structured entries for metrics.
    """
    global _perf_logger

    if _perf_logger is None:
        _perf_logger = logging.getLogger("jiraclient.performance")
        _perf_logger.setLevel(logging.INFO)
        _perf_logger.addHandler(logging.NullHandler())
        # Don't propagate to parent logger
        _perf_logger.propagate = False

    return _perf_logger


def _parse_log_level(level_str: str) -> int:
    """Parse a log level string to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }
    return levels.get(level_str.lower(), logging.INFO)


def _rotating_handler(path: Path, level: int, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def configure_logging(verbose: bool = False, log_dir: Path | None = None) -> None:
    """Attach console (and optionally file) handlers to the jiraclient loggers.

    Levels come from the [logging] section of the settings file.

    Args:
        verbose: If True, show debug output on console.
        log_dir: If given, also write rotating log files in this directory.
    """
    # Import here to avoid circular imports
    from .config import load_settings

    settings = load_settings()
    file_level = _parse_log_level(settings.logging.level)
    console_level = logging.DEBUG if verbose else _parse_log_level(settings.logging.console_level)

    logger = get_logger()
    logger.setLevel(logging.DEBUG)  # Let handlers filter

    # Prevent duplicate handlers
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    console_handlers = [
        h
        for h in logger.handlers
        if type(h) is logging.StreamHandler and h.stream == sys.stderr
    ]

    if console_handlers:
        for handler in console_handlers:
            handler.setLevel(console_level)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

    for handler in file_handlers:
        handler.setLevel(file_level)

    if log_dir is None or file_handlers:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.addHandler(
        _rotating_handler(
            log_dir / MAIN_LOG_NAME,
            file_level,
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        )
    )
    get_performance_logger().addHandler(
        _rotating_handler(log_dir / PERFORMANCE_LOG_NAME, logging.INFO, "%(asctime)s | %(message)s")
    )


def log_performance(
    operation: str,
    duration_ms: float,
    **metrics: Any,
) -> None:
    """Log a performance metric.

    Args:
        operation: Name of the operation (e.g., "dispatch").
        duration_ms: Duration in milliseconds.
        **metrics: Additional key-value metrics to include.
    """
    logger = get_performance_logger()

    parts = [f"op={operation}", f"duration_ms={duration_ms:.2f}"]
    for key, value in metrics.items():
        parts.append(f"{key}={value}")

    logger.info(" | ".join(parts))


class PerformanceTimer:
    """Context manager for timing operations.

    Usage:
        with PerformanceTimer("dispatch", method="GET") as timer:
            # ... do work ...
            timer.add_metric("status", 200)
    """

    def __init__(self, operation: str, **initial_metrics: Any):
        self.operation = operation
        self.metrics = initial_metrics
        self._start_time: datetime | None = None

    def __enter__(self) -> "PerformanceTimer":
        self._start_time = datetime.now(UTC)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._start_time is None:
            return

        duration = (datetime.now(UTC) - self._start_time).total_seconds() * 1000

        if exc_type is not None:
            self.metrics["error"] = exc_type.__name__

        log_performance(self.operation, duration, **self.metrics)

    def add_metric(self, key: str, value: Any) -> None:
        """Add a metric to be logged."""
        self.metrics[key] = value
