"""
Logging configuration for the application.

Only the ``mock_users_api`` package logger is configured here; the
root logger and uvicorn's own loggers are left as the host process
set them up.  The request logging middleware, the error handlers and
the user store all log under this package, so ``LOG_LEVEL`` controls
exactly their output.

Console output reuses uvicorn's ``DefaultFormatter`` so application
lines look like the server's access and error lines.
"""

import logging
from pathlib import Path
from typing import Optional

from uvicorn.logging import DefaultFormatter


PACKAGE_LOGGER = "mock_users_api"

CONSOLE_FORMAT = "%(levelprefix)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Configure and return the package logger.

    The level is always (re)applied.  Handlers are attached only on
    the first call for a given logger:

    * a console handler, unless the root logger already has handlers
      (records propagate there, so a second console line would be a
      duplicate);
    * a file handler when ``logfile`` is given.

    Unknown level names fall back to ``INFO``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    if not logging.getLogger().handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DefaultFormatter(fmt=CONSOLE_FORMAT, use_colors=None))
        logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    return logger
