"""
Logging configuration for tweening.

The library only emits DEBUG records; applications decide where they go
by calling configure_logging() or by configuring the "tweening" logger
themselves.
"""

import functools
import logging
import time
from typing import Optional, Union


LOGGER_NAME = "tweening"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a tweening module.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger inside the "tweening" hierarchy
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler (and optionally a file handler) to the
    package logger.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Logging level (e.g., logging.DEBUG or "DEBUG")
        log_file: Optional file path for logging output
        fmt: Record format string

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_tweening_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._tweening_handler = True
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def configure_logging(level: Union[int, str] = logging.INFO,
                      log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure global logging settings.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        log_file: Optional file path for logging output
    """
    return setup_logging(level=level, log_file=log_file)


class LogContext:
    """
    Temporarily change the level of a logger.

    Usage:
        with LogContext(logging.DEBUG):
            interpolator.interpolate(a, b, 3, 0.5, out)
    """

    def __init__(self, level: int, name: str = LOGGER_NAME):
        self.level = level
        self.logger = get_logger(name)
        self._previous: Optional[int] = None

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.logger.setLevel(self._previous)
        return False


def log_performance(func):
    """Decorator to log the wall time of a function call at DEBUG level."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = (time.perf_counter() - start) * 1000.0
            logger.debug(f"{func.__name__} took {elapsed:.3f}ms")

    return wrapper


__all__ = [
    "LOGGER_NAME",
    "get_logger",
    "setup_logging",
    "configure_logging",
    "LogContext",
    "log_performance",
]
