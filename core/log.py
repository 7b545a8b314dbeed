# core/log.py
"""
Logging setup for the registries.

Each registry module logs through ``logging.getLogger(__name__)``; this module
attaches a single handler to the shared ``registries`` logger.
"""
import logging
import os

ROOT_LOGGER = "registries"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "registries-console"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Configure the ``registries`` logger.

    Safe to call more than once: the handler is only installed the first time,
    later calls just update the level.

    Args:
        level: Level name or number. Falls back to the LOG_LEVEL environment
            variable, then INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
