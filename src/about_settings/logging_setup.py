from __future__ import annotations

import logging
import sys

LOGGER_NAME = "about_settings"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Reconfiguring replaces our handler instead of stacking another one.
    for h in list(logger.handlers):
        if getattr(h, "_about_settings", False):
            logger.removeHandler(h)
            h.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._about_settings = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
