"""
Logging setup for the storyboard service.

All modules log through children of the ``storyboard`` logger, so one call to
``setup_logging`` at startup configures the whole package.
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_initialized: bool = False


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger (idempotent)."""
    global _initialized

    root_logger = logging.getLogger("storyboard")
    root_logger.setLevel(level.upper())

    if not _initialized:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(handler)
        root_logger.propagate = False
        _initialized = True

    root_logger.info(f"Logging initialized - Level: {level.upper()}")
    return root_logger
