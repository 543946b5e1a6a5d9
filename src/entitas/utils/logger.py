"""Minimal logging utilities for Entitas.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from entitas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing message")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "entitas." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'entitas.mymodule'
    """
    if not (name == "entitas" or name.startswith("entitas.")):
        name = f"entitas.{name}"
    return logging.getLogger(name)
