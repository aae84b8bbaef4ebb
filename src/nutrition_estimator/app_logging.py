"""Logging configuration helpers."""

import logging
from typing import TextIO

LOGGER_NAME = "nutrition_estimator"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(
    debug: bool = False, stream: TextIO | None = None
) -> logging.Logger:
    """Route package logs to one stream handler, stderr unless ``stream`` is given.

    Calling again only updates the level and, when passed, the target stream,
    so report output on stdout never interleaves with diagnostics.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        if stream is not None:
            for handler in logger.handlers:
                if isinstance(handler, logging.StreamHandler):
                    handler.setStream(stream)
        return logger
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
