"""Centralised loguru logger shared by the whole package."""
from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logger(level: str = "INFO", sink: TextIO | None = None) -> None:
    """Replace loguru's default handler with one honouring ``level``."""

    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper(), format=_DEFAULT_FORMAT)


__all__ = ["configure_logger", "logger"]
