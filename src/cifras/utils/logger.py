"""Minimal logging utilities for cifras.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from cifras.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning expression")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "cifras." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'cifras.mymodule'
    """
    if not (name == "cifras" or name.startswith("cifras.")):
        name = f"cifras.{name}"
    return logging.getLogger(name)
