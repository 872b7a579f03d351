"""Package-wide logger configuration for slicy."""

import logging
import sys

from .config import log_level

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "slicy",
    level: str | None = None,
    format_string: str | None = None,
    stream: bool = False,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    The package logger only gets a NullHandler and keeps propagating, so the
    application decides where records go. Scripts that want output on stderr
    pass `stream=True`.

    Args:
        name: Logger name (the package name, or a dotted child of it)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for the stream handler
        stream: Also write records to stderr

    Returns:
        Configured logger instance
    """
    level = level or log_level()
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if stream and not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# Default logger shared by every slicy module
logger = setup_logger()
