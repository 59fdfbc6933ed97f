"""
Logging setup for event_schema_codegen.

Modules grab a logger with ``get_logger(__name__)``; the package logger is
silent until an application (or the CLI ``--verbose`` flag) configures it.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "event_schema_codegen"

_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Handler installed by configure_logging, if any
_handler: logging.Handler | None = None

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module inside the package."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Send the package logs to the current stderr, replacing a previous setup."""
    global _handler

    reset_logging()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)


def reset_logging() -> None:
    """Undo configure_logging: drop its handler and restore the default level."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
