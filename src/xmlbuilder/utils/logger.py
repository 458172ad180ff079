"""Minimal logging utilities for xmlbuilder.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from xmlbuilder.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "xmlbuilder." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'xmlbuilder.mymodule'
    """
    # Ensure xmlbuilder prefix for consistent namespacing
    if not (name == "xmlbuilder" or name.startswith("xmlbuilder.")):
        name = f"xmlbuilder.{name}"
    return logging.getLogger(name)
