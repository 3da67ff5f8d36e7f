"""Logging helpers for graphsolve.

The package never prints on its own. Every module logs through a child of the
``"graphsolve"`` logger, which carries only a `logging.NullHandler` until an
application opts in with `enable_console_logging`. Records still propagate to
the root logger, so an application's own ``logging.basicConfig`` (or pytest's
``caplog``) sees them.
"""

import logging
from typing import Optional

PACKAGE_LOGGER_NAME = "graphsolve"

_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER_NAME)


def _install_null_handler() -> None:
    logger = _package_logger()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a graphsolve module (pass ``__name__``)."""
    return logging.getLogger(name)


def enable_console_logging(
    level: int = logging.DEBUG,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """Attach one output handler to the package logger.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        level: Level for both the package logger and the handler.
        format_string: Record format; ``"LEVEL name: message"`` by default.
        handler: Handler to install; a stderr `logging.StreamHandler` by default.

    Returns:
        The installed handler.
    """
    logger = _package_logger()
    for old in [h for h in logger.handlers if getattr(h, "_graphsolve", False)]:
        logger.removeHandler(old)

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or _CONSOLE_FORMAT))
    handler.setLevel(level)
    handler._graphsolve = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def set_log_level(level: int) -> None:
    """Set the threshold of every graphsolve logger at once."""
    logger = _package_logger()
    logger.setLevel(level)
    for handler in logger.handlers:
        if getattr(handler, "_graphsolve", False):
            handler.setLevel(level)


def reset_logging() -> None:
    """Drop installed handlers and levels, back to the import-time state."""
    logger = _package_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    _install_null_handler()


_install_null_handler()
