"""Logging configuration for the flexdates utilities."""
import sys
from pathlib import Path
from loguru import logger

def setup_logging(log_file: Path = None, level: str = "INFO"):
    """Configure logging for the application.

    Library modules log through loguru but stay silent until this is called
    (or until ``logger.enable("flexdates")`` is called by the application).

    Args:
        log_file: Optional path to log file. If not provided, logs will only go to stderr.
        level: Minimum level for the stderr handler.
    """
    # Remove default handler
    logger.remove()
    logger.enable("flexdates")

    # Add stderr handler with custom format
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        level=level
    )

    # Add file handler if log_file is provided
    if log_file is not None:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
                   "{name}:{function}:{line} - {message}",
            level="DEBUG"
        )

__all__ = ["logger", "setup_logging"]
