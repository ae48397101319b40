from __future__ import annotations
"""Logging setup for scripts and host processes.

Library modules only call `logging.getLogger(__name__)`; whoever runs the
store calls `get_logger` once to attach a stderr handler.
"""
import logging
import sys
from typing import Optional


def get_logger(name: str = "jsonstore", log_level: Optional[str] = None) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Logger name.
        log_level: Optional log level string (e.g., "DEBUG"). Defaults to INFO.

    Returns:
        Configured logger instance.
    """
    if log_level:
        level = getattr(logging, log_level.upper(), logging.INFO)
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
