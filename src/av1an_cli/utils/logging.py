"""Logging configuration and utilities."""

import sys
from pathlib import Path
from typing import Any, Callable, Optional, Union

from loguru import logger


CONSOLE_FORMAT = (
    "<level>{level}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
    "<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    sink: Optional[Callable[[Any], None]] = None
) -> None:
    """Configure loguru sinks.

    Args:
        level: Minimum level for every sink
        log_file: Optional file receiving the same records
        sink: Console sink, stderr if not given
    """
    logger.remove()  # Remove default handler

    # stderr is looked up per message so swapped streams (tests, pagers) keep working
    logger.add(
        sink=sink or (lambda msg: sys.stderr.write(msg)),
        level=level,
        format=CONSOLE_FORMAT
    )

    if log_file:
        logger.add(
            sink=str(log_file),
            level=level,
            rotation="100 MB",
            retention="1 week"
        )
