"""Logging configuration helper."""
import logging
from logging import Logger
from curl_remote.config.settings import Settings

PACKAGE_LOGGER = "curl_remote"
HANDLER_NAME = "curl_remote.console"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

def configure_logging(settings: Settings) -> Logger:
    """Set the package logger level and attach a console handler once; the root logger is left alone."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger

def get_logger(name: str) -> Logger:
    """Get a named logger."""
    return logging.getLogger(name)
