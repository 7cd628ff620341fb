"""Loguru configuration."""

import sys

from loguru import logger


def setup_logging(debug: bool = False) -> None:
    """Configure Loguru once. Library modules only log; the CLI calls this."""
    logger.remove()  # remove default handler(s) to avoid duplicates
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        format="<green>{time:HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
               "<level>{message}</level>",
        backtrace=False,
        diagnose=False,
    )
