"""environment-driven settings for slicy."""

import os

__all__ = ["log_level", "numpy_enabled"]

_FALSY = ("0", "false", "no", "off")


def log_level() -> str:
    """level name for the package logger, from SLICY_LOG_LEVEL (default WARNING)"""
    return os.getenv("SLICY_LOG_LEVEL", "WARNING").upper()


def numpy_enabled() -> bool:
    """
    whether numeric fast paths may hand work to numpy.
    read on every call so the switch can be flipped at runtime.
    """
    return os.getenv("SLICY_NUMPY", "1").strip().lower() not in _FALSY
