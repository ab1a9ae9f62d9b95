import sys

from loguru import logger

from .config import get_settings


def setup_logging(level: str | None = None):
    """Route the package's log records to stderr at the given (or configured) level."""
    level = (level or get_settings().log_level).upper()
    logger.remove()
    logger.add(sys.stderr, level=level, backtrace=True, diagnose=False)
    logger.enable("search_server")
    return logger
