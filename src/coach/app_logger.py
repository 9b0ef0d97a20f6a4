"""
Logging setup shared by the engine and the CLI.
"""
import logging

from rich.logging import RichHandler

from .config import DEBUG_ENABLED, DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT

BASE_LOGGER_NAME = "coach"

def setup_logging(level=None):
    """Configure the base logger once and return it."""
    if level is None:
        level = "DEBUG" if DEBUG_ENABLED else DEFAULT_LOG_LEVEL
    logger = logging.getLogger(BASE_LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Avoid duplicate console handlers
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger

def get_logger(name=None):
    base = logging.getLogger(BASE_LOGGER_NAME)
    return base.getChild(name) if name else base
