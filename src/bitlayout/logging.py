"""
Logging for the bitlayout package.

Every module logs through a child of the ``bitlayout`` logger. The handler
and level live on that package logger only, so a host application can
silence or redirect the validator with a single
``logging.getLogger("bitlayout")`` call. ``bitlayout.cli`` is the one child
with a level of its own: INFO, so a ``check`` run narrates its progress.
"""

import logging
import os

PACKAGE_LOGGER = "bitlayout"
LEVEL_ENV = "BITLAYOUT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level_from_env(default: int) -> int:
    level_name = os.getenv(LEVEL_ENV)
    if not level_name:
        return default
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else default


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level_from_env(logging.WARNING))
    return logger


def get_logger(name: str) -> logging.Logger:
    package = _package_logger()
    if name == PACKAGE_LOGGER:
        return package

    logger = logging.getLogger(name)
    if name.endswith('.cli') and logger.level == logging.NOTSET:
        logger.setLevel(_level_from_env(logging.INFO))
    return logger
