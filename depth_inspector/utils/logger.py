"""Logging utilities for the depth_inspector package.

This module provides a custom logger that uses tqdm.write to log messages to the
console. Records up to INFO go to stdout, warnings and errors go to stderr.

Example:

.. code-block:: python

    from depth_inspector.utils.logger import get_logger

    get_logger().info("Pinned region at (320, 240).")

"""

import logging
import logging.config


class TqdmStreamHandler(logging.StreamHandler):
    """A handler that uses tqdm.write to log messages."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            from tqdm import tqdm

            msg = self.format(record)
            tqdm.write(msg, file=self.stream, end=self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


class LoggerMaxLevelFilter(logging.Filter):
    """This filter sets a maximum level."""

    def __init__(self, max_level: int | str):
        super().__init__()
        if isinstance(max_level, str):
            max_level = getattr(logging, max_level.upper())
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


LOGGING_CONFIG = {
    "version": 1,
    "filters": {
        "max_level": {
            "()": LoggerMaxLevelFilter,
            "max_level": logging.INFO,
        }
    },
    "handlers": {
        "stdout": {
            "class": TqdmStreamHandler,
            "formatter": "simple",
            "stream": "ext://sys.stdout",
            "level": logging.DEBUG,
            "filters": ["max_level"],
        },
        "stderr": {
            "class": TqdmStreamHandler,
            "formatter": "simple",
            "stream": "ext://sys.stderr",
            "level": logging.WARNING,
        },
    },
    "loggers": {
        "depth_inspector": {
            "level": logging.INFO,
            "handlers": ["stdout", "stderr"],
            # Don't pass records on to the root logger, otherwise they print twice
            "propagate": False,
        },
    },
    "formatters": {
        "simple": {
            "format": "%(levelname)-8s | %(module)s.%(funcName)s:%(lineno)d :: %(message)s"
        }
    },
    "disable_existing_loggers": False,
}


def get_logger(
    name: str = "depth_inspector", *, overrides: dict | None = None, level: int | None = None
) -> logging.Logger:
    """Returns the package logger, (re)applying :data:`LOGGING_CONFIG`.

    Args:
        name (str): Logger name. Defaults to the package logger.

    Keyword Args:
        overrides (dict | None): Top-level keys merged into the logging config.
        level (int | None): Overrides the level of the named logger.
    """
    if level is not None:
        LOGGING_CONFIG.setdefault("loggers", {}).setdefault(name, {})["level"] = level
    if overrides:
        LOGGING_CONFIG.update(overrides)
    try:
        logging.config.dictConfig(LOGGING_CONFIG)
    except ValueError:
        pass
    return logging.getLogger(name)
