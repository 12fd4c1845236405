"""Logging helpers shared by every recordbridge module."""

import logging
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "recordbridge"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())

_stream_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger nested under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def configure_logging(level: Union[int, str] = "WARNING") -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Safe to call repeatedly; only one handler is ever installed.
    """
    global _stream_handler

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    if _stream_handler is None:
        _stream_handler = logging.StreamHandler()
        _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _package_logger.addHandler(_stream_handler)

    _package_logger.setLevel(level)
    return _package_logger
