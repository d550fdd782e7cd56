"""
Logging infrastructure.

All storefront loggers hang off the "storefront" package logger, which
owns the single stream handler.
"""
from typing import Union
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
ROOT_LOGGER_NAME = "storefront"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach the stream handler to the package logger and set its level.

    Safe to call repeatedly; only the level changes after the first call.

    Args:
        level: Logging level name ("DEBUG") or number

    Returns:
        The package logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance, configuring the package logger on first use.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        configure_logging()
    return logging.getLogger(name)
