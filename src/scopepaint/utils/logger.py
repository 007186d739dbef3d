"""Minimal logging utilities for scopepaint.

Example:
    >>> from scopepaint.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiled grammar %s", "rust")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "scopepaint.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'scopepaint.mymodule'
    """
    if not (name == "scopepaint" or name.startswith("scopepaint.")):
        name = f"scopepaint.{name}"
    return logging.getLogger(name)
