"""
Utility functions and helpers.

This module contains shared utilities used across schemadoc components.

Components:
    - setup_logging: Logging configuration with a rich console handler

Example:
    ```python
    from schemadoc.utils import setup_logging

    setup_logging(level="DEBUG")
    ```
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logging(level: Union[int, str] = "WARNING", console: Optional[Console] = None) -> None:
    """
    Route schemadoc log records to a RichHandler.

    Args:
        level: Level name or number for the "schemadoc" logger
        console: Console to write to (stderr by default)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("schemadoc")
    logger.handlers = [handler]
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False


__all__ = ["setup_logging"]
