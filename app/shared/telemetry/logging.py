"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise the configured
    level (Logging:LogLevel:Default). A level of None disables logging.
    Output goes to stdout.
    """
    settings = get_settings()
    level_name = "DEBUG" if settings.debug else settings.logging_level
    if level_name == "DISABLED":
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

