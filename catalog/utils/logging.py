"""
Logging utilities for the parts catalog backend.

Provides standardized logger configuration following security and privacy rules.

CRITICAL SECURITY RULES:
- NEVER log the Supabase anon key or any other secret
- NEVER log passwords or password hashes
- NEVER log verification codes

Acceptable logging:
- High-level events (e.g., "Supabase client initialized", "User registered")
- Record identifiers (user id, part id, cart item id)
- Whether a configuration variable exists, never its value
"""

import logging
from typing import Optional

from catalog.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from catalog.utils.logging import get_logger
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
