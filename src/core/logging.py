"""
Logging for the review bot.

Every record carries ``logger_name`` (the area that logged it, e.g.
``reviewer.service``). Local runs get readable coloured lines; deployed
instances emit one JSON object per record so webhook deliveries can be
traced in a log aggregator.
"""

import sys
from typing import Optional

from loguru import logger

from src.config import settings

DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)


def resolve_log_level() -> str:
    """LOG_LEVEL wins; otherwise DEBUG when debugging, else INFO."""
    if settings.log_level:
        return settings.log_level.upper()
    return "DEBUG" if settings.debug else "INFO"


def configure_logging() -> None:
    """Install the single stderr sink for this process."""
    logger.remove()
    logger.configure(extra={"logger_name": "bot"})

    if settings.environment == "development":
        logger.add(
            sys.stderr,
            format=DEV_FORMAT,
            level=resolve_log_level(),
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=resolve_log_level(),
            serialize=True,
            diagnose=False,
        )


configure_logging()


def get_logger(name: Optional[str] = None):
    """Logger tagged with the calling area, e.g. ``get_logger("llm")``."""
    if name:
        return logger.bind(logger_name=name)
    return logger
