"""Loguru setup shared by the CLI and library modules"""

import sys

from loguru import logger


LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> ║ "
    "<level>{message}</level>"
)

LEVELS = {0: "INFO", 1: "DEBUG"}


def configure_logging(verbosity: int = 0) -> None:
    """Replace loguru's default sink with a stderr sink at the level for verbosity."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=LEVELS.get(verbosity, "TRACE"))
