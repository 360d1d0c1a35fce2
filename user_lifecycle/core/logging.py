"""Loguru setup for scripts and long-running processes."""
from __future__ import annotations

import sys

from loguru import logger

from .config import get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level> {extra}"
)


def configure_logging(level: str | None = None) -> None:
    """Reset loguru and install a single stderr sink."""
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
        colorize=True,
    )
