import sys

from loguru import logger

from utils.settings import get_settings


def setup_logger() -> None:
    """Route all logs to stderr; stdout belongs to the stdio transport."""
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        backtrace=True,
        diagnose=False,
        colorize=False,
    )
