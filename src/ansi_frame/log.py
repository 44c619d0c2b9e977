"""Logging setup. The terminal belongs to the UI, so logs go to a file."""

from __future__ import annotations

import logging
from typing import Optional

from ansi_frame.config import FrameConfig

PACKAGE_LOGGER = "ansi_frame"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: Optional[FrameConfig] = None) -> logging.Logger:
    """
    Configure the package logger.

    With ``config.debug`` set, DEBUG records go to ``config.log_file``;
    otherwise a NullHandler keeps the package quiet. Calling again replaces
    handlers installed by a previous call.
    """
    config = config or FrameConfig.from_env()
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, "_ansi_frame", False):
            logger.removeHandler(existing)
            existing.close()

    handler: logging.Handler
    if config.debug:
        handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()
    handler._ansi_frame = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
