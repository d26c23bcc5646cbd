"""Logging setup for cursor-pager.

Modules log through ``logging.getLogger(__name__)``; this only attaches a
handler and level to the package logger.
"""

import logging
from typing import Optional

from .config import Settings, get_settings

PACKAGE_LOGGER = "cursor_pager"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Apply the configured level and format to the package logger.
    
    Args:
        settings: Settings to read from, defaults to the global instance
        
    Returns:
        The configured package logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level))
    
    # Repeated calls only update the level and format
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(settings.log_format))
    
    return logger
