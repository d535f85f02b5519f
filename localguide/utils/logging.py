"""
Logging utilities for the Local Guide backend.

Provides standardized logger configuration.

SECURITY RULES:
- NEVER log GOOGLE_API_KEY or any other secret
- NEVER log the full augmented prompt (it embeds the whole knowledge table)

Acceptable logging:
- High-level events (e.g., "Received message about 'food'")
- Non-sensitive metadata (row counts, prompt length, number of links)
- Retry attempts and provider error messages
- Pipeline stage and category for every caught error
"""

import logging
from typing import Optional

from localguide.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from localguide.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
