"""Logger factory for calclex.

Every calclex logger lives under the "calclex" namespace, so one call to
``logging.getLogger("calclex").setLevel(logging.DEBUG)`` exposes them all.
The package attaches no handlers and only logs at DEBUG.

Example:
    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> from calclex import parse
    >>> parse("1+")
    DEBUG:calclex.validator:Rejected expression: Invalid expression at position 2
    Traceback (most recent call last):
    ...
    calclex.errors.InvalidExpressionError: Invalid expression at position 2
"""

from __future__ import annotations

import logging

_ROOT = "calclex"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Names outside the namespace are prefixed with "calclex.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'calclex.mymodule'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
