"""Logging configuration for the random number generation package.

All loggers live under the ``texrand`` namespace. The package installs a
NullHandler so library use stays silent until an application (or the
dump script) calls configure_logging().
"""

from __future__ import annotations

import logging

__all__ = ["LOGGER_NAME", "get_logger", "configure_logging"]

LOGGER_NAME = "texrand"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Dotted suffix, typically the module's __name__.

    Returns:
        logging.getLogger("texrand") or a child of it.
    """
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.INFO, *, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once replaces the previously installed stream
    handler instead of stacking duplicates.

    Args:
        level: Logging level (int or name such as "DEBUG").
        fmt: Format string for the handler.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_texrand_stream", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._texrand_stream = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
