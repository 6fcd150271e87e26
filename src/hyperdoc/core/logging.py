"""Loguru sink setup for hyperdoc front ends.

The library itself only emits records through ``loguru.logger``; applications
decide where they go. The CLI calls :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from .config import LoggingConfig

_SIMPLE_FORMAT = "<level>{level: <8}</level> | {message}"
_VERBOSE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - {message}"
)


def configure_logging(config: LoggingConfig, sink: TextIO | None = None) -> int:
    """Replace loguru's default handler with one honouring ``config``.

    Args:
        config: Level and format settings.
        sink: Stream to write to (default: stderr).

    Returns:
        The loguru handler id of the installed sink.
    """
    logger.remove()
    return logger.add(
        sink or sys.stderr,
        level=config.level,
        format=_VERBOSE_FORMAT if config.verbose else _SIMPLE_FORMAT,
    )
