"""Logging configuration helpers."""

import logging

LOGGER_NAME = "food_dashboard"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Send dashboard logs to one stream handler at the given level.

    Repeated calls only adjust the level; the handler is installed once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
