"""
Diagnostic logging setup for tinyscript.

The library only logs; it never configures handlers on its own. A driver
that wants to see the lexer's per-token debug output calls
``enable_logging()`` once.
"""

import logging
from typing import IO, Optional

LOGGER_NAME = "tinyscript"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def enable_logging(level: int = logging.DEBUG, stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger (only once).

    Args:
        level: Logging level for the whole package
        stream: Where to write, stderr by default
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _handler is None:
        _handler = logging.StreamHandler(stream)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    return logger


def disable_logging() -> None:
    """Remove the handler added by enable_logging."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = None
    logger.setLevel(logging.NOTSET)
