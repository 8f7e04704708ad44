import logging
import sys
from typing import Optional


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the ``media_scraper`` logger.

    Args:
        level: Logging level name; unknown names fall back to INFO
        format_string: Optional custom format for log records
        force: Replace existing handlers instead of keeping them

    Returns:
        The configured package logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger("media_scraper")
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        logger.handlers.clear()
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

    # uvicorn configures the root logger; keep our lines from printing twice
    logger.propagate = False

    return logger
