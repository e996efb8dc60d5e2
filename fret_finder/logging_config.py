"""Centralized logging configuration for Fret Finder.

This module provides a consistent way to configure logging across the application.
Log records go to stderr so they never mix with diagrams printed on stdout.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "fret_finder": logging.WARNING,
    "fret_finder.pitch": logging.WARNING,
    "fret_finder.guitar": logging.WARNING,
    "fret_finder.diagram": logging.WARNING,
    "fret_finder.config": logging.WARNING,
    # Command line
    "fret_finder.cli": logging.WARNING,
    "fret_finder.cli.main": logging.WARNING,
    # Root logger
    "": logging.ERROR,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'fret_finder' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # One console handler shared by every configured logger, bound to the
    # current stderr
    if _console_handler is not None:
        _console_handler.close()
    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Determine log levels
    log_levels = MODULE_LOG_LEVELS.copy()
    invalid_level = None
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("fret_finder"):
                    log_levels[module_name] = numeric_level
        else:
            invalid_level = level

    # Apply module-specific levels
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name)
        logger.setLevel(module_level)

        # Clear existing handlers and add the shared one
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_console_handler)
        logger.propagate = False

    if invalid_level is not None:
        logging.getLogger(__name__).error(f"Invalid log level: {invalid_level}")
    logging.getLogger("fret_finder").debug("Logging configuration complete")
