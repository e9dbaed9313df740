"""Defines the :class:`.Logger` class and one-line package log helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "juliantime"
"""``str``: name of the top-level logger that the ``juliantimeLog*`` helpers write to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by every handler a :class:`.Logger` attaches."""


class Logger:
    """Extended logger wraps the standard Python logging package.

    Handler settings default to the ``logging`` section of :class:`.BehavioralConfig`. Log
    files are named ``<name>_<timestamp>.log`` under the configured output location.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``): Name of the the logger instance
            level (``int``, optional): Determines what level of log messages are published
            path (``str``, optional): directory for the log file, or ``"stdout"``/``"stderr"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig().logging
        if not level:
            level = config.Level
        if not path:
            path = config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.filename = None
        self.logger = logging.getLogger(name)
        if not self.logger.handlers or allow_multiple_handlers is True:
            handler = self._buildHandler(name, path)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def _buildHandler(self, name: str, path: str) -> logging.Handler:
        """Create a stream handler for "stdout" or "stderr", or a rotating file handler inside `path`."""
        if path == "stdout":
            self.filename = "stdout"
            return logging.StreamHandler(sys.stdout)
        if path == "stderr":
            self.filename = "stderr"
            return logging.StreamHandler(sys.stderr)

        if not exists(path):
            self.logger.info(f"Path did not exist: {path!r}. Creating path...")
            makedirs(path)

        self.filename = join(path, f"{name}_{pathSafeTime()}.log")
        config = BehavioralConfig.getConfig().logging
        return RotatingFileHandler(
            self.filename,
            maxBytes=config.MaxFileSize,
            backupCount=config.MaxFileCount,
        )

    def __getattr__(self, name):
        """Defer everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _juliantimeLog(message: str, level: int):
    """Log a message to the top-level ``juliantime`` log record.

    This provides a simple one-liner for plain functions that don't own a logger object.

    Args:
        message (``str``): message to record in the log.
        level (``int``): `logging` level at which to log this message.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def juliantimeLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _juliantimeLog(message, level=logging.CRITICAL)


def juliantimeLogError(message: str):
    """Log an ERROR message to the top-level log record.

    See Also:
        :func:`._juliantimeLog`
    """
    _juliantimeLog(message, level=logging.ERROR)


def juliantimeLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _juliantimeLog(message, level=logging.WARNING)


def juliantimeLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _juliantimeLog(message, level=logging.INFO)


def juliantimeLogDebug(message: str):
    """Log a DEBUG message to the top-level log record."""
    _juliantimeLog(message, level=logging.DEBUG)
