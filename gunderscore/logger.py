"""Logger of the gunderscore package.

The package only attaches a NullHandler. Applications that want to see its
messages call 'setup_logger' or configure logging themselves.
"""

import logging
import sys

__all__ = ["logger", "setup_logger", "set_level"]


logger = logging.getLogger("gunderscore")
logger.addHandler(logging.NullHandler())


def setup_logger(name="gunderscore", level=None, format_string=None):
    """
    Send the messages of a gunderscore logger to stderr.

    Args:
        name: Logger name, "gunderscore" or one of its children
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). None leaves
            the current level alone.
        format_string: Custom format string

    Returns:
        The configured logger
    """
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    target = logging.getLogger(name)

    # NullHandler is not a StreamHandler, so this only skips our own handler
    if not any(isinstance(h, logging.StreamHandler) for h in target.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        target.addHandler(handler)
    if level is not None:
        target.setLevel(getattr(logging, level.upper()))

    return target


def set_level(level):
    logger.setLevel(getattr(logging, level.upper()))
