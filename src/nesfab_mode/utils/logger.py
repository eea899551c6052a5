"""Minimal logging utilities for nesfab-mode.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from nesfab_mode.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Computing indent")
"""

from __future__ import annotations

import logging

_ROOT = "nesfab_mode"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "nesfab_mode." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'nesfab_mode.mymodule'
    """
    # Ensure nesfab_mode prefix for consistent namespacing
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
